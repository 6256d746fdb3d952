# -*- coding: utf-8 -*-

import logging

import pytest

from promises import AlreadySettled, Deferred, InvalidArgument, Promise, \
    Status
from promises.common import config


class TestDeferredStatus(object):

    def test_new_deferred_is_unfulfilled(self):
        df = Deferred()
        assert df.status() is Status.UNFULFILLED
        assert df.is_unfulfilled()
        assert df.is_in_progress()
        assert not df.is_fulfilled()
        assert not df.is_failed()
        assert df.result() is None

    def test_deferred_has_one_promise(self):
        df = Deferred()
        assert isinstance(df.promise, Promise)
        assert df.promise is df.promise

    def test_resolve(self):
        df = Deferred()
        assert df.resolve(1, 'two', [3]) is df
        assert df.status() is Status.RESOLVED
        assert df.result() == (1, 'two', [3])
        assert df.is_resolved()
        assert df.is_fulfilled()
        assert not df.is_unfulfilled()
        assert not df.is_failed()

    def test_resolve_without_value(self):
        df = Deferred()
        df.resolve()
        assert df.is_resolved()
        assert df.result() == ()

    def test_reject(self):
        df = Deferred()
        assert df.reject('boom', 500) is df
        assert df.status() is Status.REJECTED
        assert df.result() == ('boom', 500)
        assert df.is_rejected()
        assert df.is_failed()
        assert not df.is_fulfilled()

    def test_transitional_status_during_notification(self):
        """The callbacks are executed while the status is RESOLVING."""
        df = Deferred()
        seen = []
        df.then(lambda *_: seen.append((df.status(), df.is_resolving(),
                                        df.is_fulfilled())))
        df.resolve()
        assert seen == [(Status.RESOLVING, True, True)]
        assert df.status() is Status.RESOLVED

    def test_rejecting_status_during_notification(self):
        df = Deferred()
        seen = []
        df.then(lambda: None,
                lambda *_: seen.append((df.status(), df.is_rejecting())))
        df.reject('error')
        assert seen == [(Status.REJECTING, True)]
        assert df.status() is Status.REJECTED


class TestDeferredThen(object):

    def test_callback_registered_before_resolution(self):
        df = Deferred()
        calls = []
        df.then(lambda *values: calls.append(values))
        assert calls == []

        df.resolve('a', 'b')
        assert calls == [('a', 'b')]

    def test_callback_registered_after_resolution(self):
        """A callback added on a resolved Deferred is called immediately."""
        df = Deferred()
        df.resolve('a', 'b')

        calls = []
        df.then(lambda *values: calls.append(values))
        assert calls == [('a', 'b')]
        assert df.is_resolved()
        assert df.result() == ('a', 'b')

    def test_callback_registered_after_rejection(self):
        df = Deferred()
        df.reject('error')

        calls = []
        df.then(lambda *_: calls.append('success'),
                lambda *values: calls.append(values))
        assert calls == [('error',)]
        assert df.is_rejected()

    def test_late_callbacks_are_called_once(self):
        df = Deferred()
        first, second = [], []
        df.then(lambda value: first.append(value))
        df.resolve(3)
        df.then(lambda value: second.append(value))
        df.then(lambda value: second.append(value * 2))

        assert first == [3]
        assert second == [3, 6]

    def test_callbacks_called_in_registration_order(self):
        df = Deferred()
        calls = []
        for i in range(5):
            df.then(lambda value, i=i: calls.append(i))
        df.resolve(None)
        assert calls == [0, 1, 2, 3, 4]

    def test_only_success_callback_on_resolution(self):
        df = Deferred()
        calls = []
        df.then(lambda *_: calls.append('success'),
                lambda *_: calls.append('error'))
        df.resolve()
        assert calls == ['success']

    def test_only_error_callback_on_rejection(self):
        df = Deferred()
        calls = []
        df.then(lambda *_: calls.append('success'),
                lambda *_: calls.append('error'))
        df.reject()
        assert calls == ['error']

    def test_then_returns_promise_of_new_deferred(self):
        df = Deferred()
        p = df.then(lambda x: x)
        assert isinstance(p, Promise)
        assert p is not df.promise
        assert p.is_unfulfilled()

    def test_double_value(self):
        df = Deferred()
        child = df.then(lambda x: x * 2)
        df.resolve(21)
        assert child.is_resolved()
        assert child.result() == (42,)

    def test_callback_registered_during_notification(self):
        """A callback added by another callback is called last."""
        df = Deferred()
        calls = []

        def outer1(value):
            df.then(lambda v: calls.append(('inner', v, df.status())))
            calls.append(('outer1', value, df.status()))

        df.then(outer1)
        df.then(lambda v: calls.append(('outer2', v, df.status())))
        df.resolve(7)

        assert calls == [('outer1', 7, Status.RESOLVING),
                         ('outer2', 7, Status.RESOLVING),
                         ('inner', 7, Status.RESOLVING)]
        assert df.is_resolved()

    def test_error_callback_registered_during_notification(self):
        df = Deferred()
        calls = []

        def outer1(reason):
            df.then(lambda v: calls.append('success'),
                    lambda r: calls.append(('inner', r, df.status())))
            calls.append(('outer1', reason, df.status()))

        df.then(lambda v: calls.append('success'), outer1)
        df.then(lambda v: calls.append('success'),
                lambda r: calls.append(('outer2', r, df.status())))
        df.reject('boom')

        assert calls == [('outer1', 'boom', Status.REJECTING),
                         ('outer2', 'boom', Status.REJECTING),
                         ('inner', 'boom', Status.REJECTING)]
        assert df.is_rejected()

    def test_callback_registered_during_replay(self):
        """A late callback registering another one keeps the order."""
        df = Deferred()
        df.resolve(1)
        calls = []

        def late(value):
            df.then(lambda v: calls.append(('nested', df.status())))
            calls.append(('late', df.status()))

        df.then(late)
        assert calls == [('late', Status.RESOLVING),
                         ('nested', Status.RESOLVING)]
        assert df.is_resolved()

    def test_callback_raising_exception(self):
        """The exception is propagated, but the Deferred is settled."""
        class Err(Exception):
            pass

        def failing(_):
            raise Err()

        df = Deferred()
        df.then(failing)
        with pytest.raises(Err):
            df.resolve(1)
        assert df.is_resolved()
        assert df.result() == (1,)


class TestDeferredThenArguments(object):

    def test_missing_success_callback(self):
        df = Deferred()
        with pytest.raises(InvalidArgument):
            df.then(None)

    def test_success_callback_not_callable(self):
        df = Deferred()
        with pytest.raises(InvalidArgument):
            df.then('not a function')

    def test_error_callback_not_callable(self):
        df = Deferred()
        with pytest.raises(InvalidArgument):
            df.then(lambda x: x, 42)

    def test_invalid_argument_is_a_type_error(self):
        df = Deferred()
        with pytest.raises(TypeError):
            df.then(42)

    def test_invalid_then_registers_nothing(self):
        df = Deferred()
        with pytest.raises(InvalidArgument):
            df.then(lambda x: x, 'error')
        assert df._callbacks == []
        assert df._errbacks == []


class TestDeferredResettle(object):

    def test_resettle_ignored_by_default(self, caplog):
        df = Deferred()
        df.resolve('first')
        with caplog.at_level(logging.WARNING, logger='promises'):
            df.resolve('second')
        assert df.result() == ('first',)
        assert df.is_resolved()
        assert 'already settled' in caplog.text

    def test_reject_after_resolve_is_ignored(self):
        df = Deferred()
        calls = []
        df.then(lambda *_: calls.append('success'),
                lambda *_: calls.append('error'))
        df.resolve('first')
        df.reject('second')
        assert calls == ['success']
        assert df.is_resolved()

    def test_resettle_overwrite(self, caplog):
        config.set('resettle_policy', 'overwrite')
        df = Deferred()
        first_calls, late_calls = [], []
        df.then(lambda value: first_calls.append(value))
        df.resolve('first')

        with caplog.at_level(logging.WARNING, logger='promises'):
            df.resolve('second')
        assert df.result() == ('second',)
        assert first_calls == ['first']
        assert 'overwritten' in caplog.text

        df.then(lambda value: late_calls.append(value))
        assert late_calls == ['second']

    def test_resettle_raise(self):
        config.set('resettle_policy', 'raise')
        df = Deferred()
        df.reject('first')
        with pytest.raises(AlreadySettled):
            df.resolve('second')
        assert df.is_rejected()
        assert df.result() == ('first',)

    def test_replay_is_not_a_resettle(self):
        config.set('resettle_policy', 'raise')
        df = Deferred()
        df.resolve(1)
        calls = []
        df.then(lambda value: calls.append(value))
        assert calls == [1]


class TestDeferredRepr(object):

    def test_repr_single_deferred(self):
        df = Deferred(_name='fetch')
        assert repr(df) == 'Deferred(fetch P)'
        df.resolve()
        assert repr(df) == 'Deferred(fetch F)'

    def test_repr_chain(self):
        def double(x):
            return x * 2

        def on_error(*args):
            return args

        df = Deferred(_name='fetch')
        p = df.then(double).then(double, on_error)
        df.reject('error')
        assert repr(p) == 'Promise(fetch R -> double R -> <double, ' \
                          'on_error> R)'
