# -*- coding: utf-8 -*-


class PromiseError(Exception):
    """Base class of all errors raised by the promises package."""
    pass


class InvalidArgument(PromiseError, TypeError):
    """A callback given to ``then()`` is missing or is not callable.

    It's a programming error of the caller: it's never caught by the
    promises package.
    """
    pass


class AlreadySettled(PromiseError):
    """A Deferred already settled has been resolved or rejected again.

    Only raised when the ``resettle_policy`` config entry is ``raise``.
    """
    pass


class PromiseRejected(PromiseError):
    """Rejection of a Promise, converted into an exception.

    Rejections are normal values flowing through the failure path of a
    chain. This exception is used at the boundary with code expecting
    exceptions, like the generators decorated by ``reduce_coroutine``.

    Attributes:
        values (tuple): the values passed to ``reject()``.
    """

    def __init__(self, *values):
        PromiseError.__init__(self, *values)
        self.values = values
