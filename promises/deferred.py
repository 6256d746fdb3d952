# -*- coding: utf-8 -*-

import logging

from .common import config
from .errors import AlreadySettled, InvalidArgument
from .promise import Promise
from .status import Status
from .util import as_values, is_thenable, pass_through

_logger = logging.getLogger(__name__)


class Deferred(object):
    """Producer side of an asynchronous operation.

    A Deferred is the "creator" side of an async task, whereas a Promise
    represents the asynchronous value from the "consumer" side. The producer
    keeps the Deferred, gives its ``promise`` to the consumers, then calls
    ``resolve()`` or ``reject()`` once the operation is done.

    Nothing is scheduled: ``resolve()`` and ``reject()`` execute all the
    registered continuations, and the continuations of their children, before
    returning.

    Example:

        >>> def fetch_it(uri):
        ...     df = Deferred()
        ...     def on_response(body, status_code):
        ...         if status_code == 200:
        ...             df.resolve(body)
        ...         else:
        ...             df.reject(status_code, body)
        ...     http_get(uri, on_response)
        ...     return df.promise

    Attributes:
        promise (Promise): read-only handle associated to the Deferred.
    """

    def __init__(self, _name=None, _previous=None):
        """
        Args:
            _name (str, optional): if set, name used when converted to text.
            _previous (Deferred, optional): parent link in a chain, used when
                converted to text.
        """
        self._status = Status.UNFULFILLED
        self._result = None
        self._callbacks = []
        self._errbacks = []
        self._name = _name or '???'
        self._previous = _previous
        self._promise = Promise(self)

    @property
    def promise(self):
        return self._promise

    def status(self):
        """Returns: Status: the current status."""
        return self._status

    def result(self):
        """Values passed to ``resolve()`` or ``reject()``.

        Returns:
            tuple: the argument list of the settlement, or None if the
                Deferred is not yet settled.
        """
        return self._result

    def is_in_progress(self):
        return self._status is Status.UNFULFILLED

    def is_resolving(self):
        return self._status is Status.RESOLVING

    def is_rejecting(self):
        return self._status is Status.REJECTING

    def is_resolved(self):
        return self._status is Status.RESOLVED

    def is_rejected(self):
        return self._status is Status.REJECTED

    def is_unfulfilled(self):
        return self._status.is_unfulfilled

    def is_fulfilled(self):
        return self._status.is_fulfilled

    def is_failed(self):
        return self._status.is_failed

    def resolve(self, *values):
        """Settle the Deferred successfully and notify the success callbacks.

        Args:
            *values: result of the operation. They're passed as is to each
                success callback.
        Returns:
            Deferred: self
        Raises:
            AlreadySettled: if the Deferred is already settled and the
                ``resettle_policy`` config is 'raise'.
        """
        if self._accept_settlement('resolve', values):
            self._settle(values, Status.RESOLVING, Status.RESOLVED)
        return self

    def reject(self, *values):
        """Settle the Deferred as failed and notify the error callbacks.

        Args:
            *values: reason of the failure. They're passed as is to each
                error callback.
        Returns:
            Deferred: self
        Raises:
            AlreadySettled: if the Deferred is already settled and the
                ``resettle_policy`` config is 'raise'.
        """
        if self._accept_settlement('reject', values):
            self._settle(values, Status.REJECTING, Status.REJECTED)
        return self

    def then(self, on_fulfilled, on_rejected=None):
        """Register callbacks called when the Deferred is settled.

        The success callback is called with the values passed to
        ``resolve()``; the error callback with the values passed to
        ``reject()``. Callbacks registered after the settlement are called
        immediately.

        The value returned by the callback settles the new link of the chain:
        a success callback resolves it, an error callback rejects it. If the
        callback returns a single thenable value, the new link is settled
        later, the same way the thenable will be.

        If there is no error callback, the rejection is transmitted as is to
        the next link of the chain. At the end of a chain, an unhandled
        rejection is still visible through ``result()``.

        Args:
            on_fulfilled (callable): success callback.
            on_rejected (callable, optional): error callback.
        Returns:
            Promise: handle of the new link of the chain.
        Raises:
            InvalidArgument: if a callback is missing or not callable.
        """
        if not callable(on_fulfilled):
            raise InvalidArgument('You must pass in a success callback, '
                                  'got %r' % (on_fulfilled,))
        if on_rejected is None:
            name = getattr(on_fulfilled, '__name__', '???')
            on_rejected = pass_through
        elif not callable(on_rejected):
            raise InvalidArgument('The error callback must be callable, '
                                  'got %r' % (on_rejected,))
        else:
            name = '<%s, %s>' % (getattr(on_fulfilled, '__name__', '???'),
                                 getattr(on_rejected, '__name__', '???'))

        df = self.__class__(_name=name, _previous=self)

        self._callbacks.append(self._wrap(df, on_fulfilled, df.resolve))
        self._errbacks.append(self._wrap(df, on_rejected, df.reject))

        # Late registration: replay the settlement for the new callbacks.
        # During a notification, the new callbacks are drained by _settle().
        if self._status is Status.RESOLVED:
            self._settle(self._result, Status.RESOLVING, Status.RESOLVED)
        elif self._status is Status.REJECTED:
            self._settle(self._result, Status.REJECTING, Status.REJECTED)

        return df.promise

    def __repr__(self):
        return 'Deferred(%s)' % self._inner_print()

    def _inner_print(self):
        if self._previous is not None:
            return '%s -> %s %s' % (self._previous._inner_print(), self._name,
                                    self._status.letter)
        return '%s %s' % (self._name, self._status.letter)

    def _accept_settlement(self, method, values):
        """Apply the ``resettle_policy`` when the Deferred is already settled.

        Returns:
            boolean: True if the settlement must be done.
        """
        if self._status.is_unfulfilled:
            return True

        policy = config.get('resettle_policy')
        if policy == 'raise':
            raise AlreadySettled('Unable to %s %r: already settled with %r'
                                 % (method, self, self._result))
        elif policy == 'overwrite':
            _logger.warning('%s on %r already settled. The previous result '
                            'is overwritten by: %r', method, self, values)
            return True
        _logger.warning('%s on %r already settled. New result will be '
                        'ignored: %r', method, self, values)
        return False

    def _settle(self, values, transitional, terminal):
        self._result = values
        self._status = transitional

        # Callbacks added during the notification are queued again; the
        # queue is drained until it stays empty.
        try:
            while True:
                if transitional is Status.RESOLVING:
                    callbacks = self._callbacks
                else:
                    callbacks = self._errbacks
                self._callbacks = []
                self._errbacks = []
                if not callbacks:
                    break
                self._notify(callbacks, values)
        finally:
            self._status = terminal

    @staticmethod
    def _notify(callbacks, values):
        for callback in callbacks:
            callback(*values)

    @staticmethod
    def _wrap(df, callback, settle):
        """Make the queued callback settling ``df`` with the user callback.

        Args:
            df (Deferred): the next link of the chain.
            callback (callable): user callback.
            settle (callable): ``df.resolve`` or ``df.reject``.
        """
        def wrapper(*values):
            results = as_values(callback(*values))

            if len(results) == 1 and is_thenable(results[0]):
                nested = results[0]
                _logger.debug('%r is settled by the thenable %r',
                              df, nested)

                def success(*_):
                    df.resolve(*nested.result())

                def failure(*_):
                    df.reject(*nested.result())

                nested.then(success, failure)
            else:
                settle(*results)

        return wrapper


def resolved(*values):
    """Create a Promise already fulfilled with the values specified.

    Returns:
        Promise: new Promise, resolved with ``values``.
    """
    return Deferred(_name='RESOLVED').resolve(*values).promise


def rejected(*values):
    """Create a Promise already rejected for the reason specified.

    Returns:
        Promise: new Promise, rejected with ``values``.
    """
    return Deferred(_name='REJECTED').reject(*values).promise
