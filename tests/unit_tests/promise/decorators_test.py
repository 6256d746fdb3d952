# -*- coding: utf-8 -*-

from promises import Deferred, Promise, resolved, wrap_promise


class TestDecorator(object):

    def test_wrap_sync_function(self):
        @wrap_promise
        def f(x):
            return x * 3

        p = f(30)
        assert isinstance(p, Promise)
        assert p.is_resolved()
        assert p.result() == (90,)

    def test_wrap_function_returning_several_values(self):
        @wrap_promise
        def f(x):
            return x, x + 1

        assert f(1).result() == (1, 2)

    def test_wrap_function_returning_promise(self):
        df = Deferred()

        @wrap_promise
        def f(x):
            return df.promise

        p = f(30)
        assert p is df.promise

    def test_wrap_function_returning_resolved_promise(self):
        @wrap_promise
        def f(x):
            return resolved(x + 10)

        p = f(30)
        assert isinstance(p, Promise)
        assert p.result() == (40,)

    def test_wrap_function_with_exception(self):
        class MyException(Exception):
            pass

        @wrap_promise
        def f(x):
            raise MyException()

        p = f(30)
        assert isinstance(p, Promise)
        assert p.is_rejected()
        (error,) = p.result()
        assert isinstance(error, MyException)

    def test_wrapped_function_name(self):
        @wrap_promise
        def compute():
            pass

        assert compute.__name__ == 'compute'
        assert repr(compute()) == 'Promise(compute F)'
