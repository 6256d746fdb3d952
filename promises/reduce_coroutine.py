# -*- coding: utf-8 -*-

from functools import wraps

from .deferred import Deferred
from .errors import PromiseRejected
from .util import is_thenable


def _to_sent_value(values):
    """Value sent to the generator: the only value, or the whole tuple."""
    if len(values) == 1:
        return values[0]
    return values


def reduce_coroutine(safeguard=False):
    """Decorator who converts a coroutine of promises into a single promise.

    The greatest interest is the ability to write a function in an
    synchronous-like style, using many asynchronous Promises.
    Whatever is the number of Promises or async calls used, the result will
    always be an unique Promise wrapping the whole process.

    Each yielded thenable is awaited. Its result is sent back to the
    generator; a rejection is thrown into the generator as a
    ``PromiseRejected`` exception.

    The coroutine ends when it yields a value who is not a thenable, or when
    it returns. If it returns None, the last result received is used.

    Args:
        safeguard (boolean): if true, use `Promise.safeguard()` on the
            resulting promise.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            """
            Args:
                *args
                **kwargs
            Returns:
                Promise<*>
            """
            df = Deferred(_name='COROUTINE %s' % func.__name__)
            if safeguard:
                df.promise.safeguard()

            try:
                # Create generator; Initialization phase
                gen = func(*args, **kwargs)
            except Exception as error:
                df.reject(error)
                return df.promise

            def _settle_with_error(error):
                if isinstance(error, PromiseRejected):
                    df.reject(*error.values)
                else:
                    df.reject(error)

            def _call_next_or_set_result(value):
                if is_thenable(value):
                    value.then(iter_next, iter_error)
                else:
                    gen.close()
                    df.resolve(value)

            def _end(stop, last_values):
                if stop.value is not None:
                    df.resolve(stop.value)
                else:
                    df.resolve(*last_values)

            def iter_next(*values):
                sent_value = _to_sent_value(values)
                try:
                    next_value = gen.send(sent_value)
                except StopIteration as stop:
                    return _end(stop, values)
                except Exception as error:
                    return _settle_with_error(error)
                _call_next_or_set_result(next_value)

            def iter_error(*values):
                try:
                    next_value = gen.throw(PromiseRejected(*values))
                except StopIteration as stop:
                    # The coroutine caught the rejection, then ended.
                    if stop.value is not None:
                        df.resolve(stop.value)
                    else:
                        df.reject(*values)
                    return
                except Exception as error:
                    return _settle_with_error(error)
                _call_next_or_set_result(next_value)

            # Start and resolve loop.
            try:
                first_value = next(gen)
            except StopIteration as stop:
                _end(stop, ())
                return df.promise
            except Exception as error:
                _settle_with_error(error)
                return df.promise
            _call_next_or_set_result(first_value)

            return df.promise

        return wrapper
    return decorator
