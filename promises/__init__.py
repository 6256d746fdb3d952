# -*- coding: utf-8 -*-

from .__version__ import __version__  # noqa

from .decorators import wrap_promise
from .deferred import Deferred, rejected, resolved
from .errors import AlreadySettled, InvalidArgument, PromiseError, \
    PromiseRejected
from .promise import Promise
from .reduce_coroutine import reduce_coroutine
from .status import Status
from .util import Thenable, is_thenable

__all__ = ['AlreadySettled', 'Deferred', 'InvalidArgument', 'Promise',
           'PromiseError', 'PromiseRejected', 'Status', 'Thenable',
           'is_thenable', 'reduce_coroutine', 'rejected', 'resolved',
           'wrap_promise']
