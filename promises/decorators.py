# -*- coding: utf-8 -*-

from functools import wraps

from .deferred import Deferred
from .util import as_values, is_thenable


def wrap_promise(f):
    """Decorator who converts the result in a Promise object.

    If the function decorated returns a thenable, it's transmitted as is.
    Else, a new Promise is created with the returned value as result.
    If the function raises an exception, the Promise is rejected with the
    exception as value.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        df = Deferred(_name=f.__name__)
        try:
            result = f(*args, **kwargs)
        except Exception as error:
            return df.reject(error).promise

        if is_thenable(result):
            return result
        return df.resolve(*as_values(result)).promise

    return wrapper
