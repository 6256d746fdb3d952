# -*- coding: utf-8 -*-

from enum import Enum


class Status(Enum):
    """Settlement status of a Deferred.

    ``UNFULFILLED`` is the only initial state. A Deferred reaches either the
    fulfilled states (``RESOLVING``, ``RESOLVED``) or the failed states
    (``REJECTING``, ``REJECTED``). The two transitional states are only
    visible while the callbacks are being notified.
    """

    UNFULFILLED = 'in progress'
    RESOLVING = 'resolving'
    RESOLVED = 'resolved'
    REJECTING = 'rejecting'
    REJECTED = 'rejected'

    @property
    def is_unfulfilled(self):
        return self is Status.UNFULFILLED

    @property
    def is_fulfilled(self):
        return self in (Status.RESOLVING, Status.RESOLVED)

    @property
    def is_failed(self):
        return self in (Status.REJECTING, Status.REJECTED)

    @property
    def is_transitional(self):
        return self in (Status.RESOLVING, Status.REJECTING)

    @property
    def letter(self):
        """One-letter tag used in text representations: P, F or R."""
        if self.is_fulfilled:
            return 'F'
        elif self.is_failed:
            return 'R'
        return 'P'
