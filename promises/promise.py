# -*- coding: utf-8 -*-

import logging

from .util import pass_through

_logger = logging.getLogger(__name__)


class Promise(object):
    """It represents an operation expected to be completed in the future.

    A Promise is the read-only handle of a Deferred. It allows to set
    callbacks who will be called as soon as the result is known, and to
    inspect the status, but it can't settle the operation: only the owner
    of the Deferred can call ``resolve()`` or ``reject()``.

    A Promise is created by its Deferred, and is bound to it for its whole
    life. Its attributes can't be modified.
    """

    __slots__ = ('_deferred',)

    def __init__(self, deferred):
        object.__setattr__(self, '_deferred', deferred)

    def __setattr__(self, name, value):
        raise AttributeError('Promise attributes are read-only')

    def __delattr__(self, name):
        raise AttributeError('Promise attributes are read-only')

    def status(self):
        """Returns: Status: the status of the operation."""
        return self._deferred.status()

    def result(self):
        """Returns: tuple: the settlement values, or None if not settled."""
        return self._deferred.result()

    def then(self, on_fulfilled, on_rejected=None):
        """Create a new promise from callbacks called when this one is settled.

        See ``Deferred.then()``.

        Args:
            on_fulfilled (callable): called with the values of the
                resolution.
            on_rejected (callable, optional): called with the values of the
                rejection. If not set, the rejection is transferred to the
                Promise returned.
        Returns:
            Promise: new promise depending of self.
        """
        return self._deferred.then(on_fulfilled, on_rejected)

    def catch(self, on_rejected):
        """Create a new promise with a callback called when an error occurs.

        Alias of `self.then(pass_through, on_rejected)`: a resolution is
        transferred as is to the new Promise.

        Note that the value returned by `on_rejected` rejects the new
        Promise: an error callback can transform a failure, not recover it.

        Args:
            on_rejected (callable): Will be called with the rejection values
                if `self` is rejected.
        Returns:
            Promise: new Promise chained to `self`.
        """
        return self.then(pass_through, on_rejected)

    def safeguard(self):
        """Catch all rejections and log them with the most details possible.

        This method is aimed to protect the program from unhandled rejected
        Promise. If no error handler has been set (via then() or catch()), the
        rejection is silently kept at the end of the chain.
        Calling `safeguard()` after all chains are set will catch these errors,
        and log them as ERROR with the maximum of details possible.
        """
        def guard(*values):
            exc_info = None
            if len(values) == 1 and isinstance(values[0], BaseException):
                error = values[0]
                exc_info = (type(error), error, error.__traceback__)
            _logger.error('[SAFEGUARD] %s rejected with %r', self, values,
                          exc_info=exc_info)

        self.then(pass_through, guard)

    def is_in_progress(self):
        return self._deferred.is_in_progress()

    def is_resolving(self):
        return self._deferred.is_resolving()

    def is_rejecting(self):
        return self._deferred.is_rejecting()

    def is_resolved(self):
        return self._deferred.is_resolved()

    def is_rejected(self):
        return self._deferred.is_rejected()

    def is_unfulfilled(self):
        return self._deferred.is_unfulfilled()

    def is_fulfilled(self):
        return self._deferred.is_fulfilled()

    def is_failed(self):
        return self._deferred.is_failed()

    def __repr__(self):
        return 'Promise(%s)' % self._deferred._inner_print()
