# -*- coding: utf-8 -*-

from abc import ABCMeta, abstractmethod


def _has_method(cls, name):
    return callable(getattr(cls, name, None))


class Thenable(metaclass=ABCMeta):
    """Capability of the values that can be chained.

    Any object exposing a callable ``then(on_fulfilled, on_rejected)`` and a
    callable ``result()`` is a Thenable, whatever its concrete type. There is
    no need to inherit from this class.
    """

    @abstractmethod
    def then(self, on_fulfilled, on_rejected=None):
        pass

    @abstractmethod
    def result(self):
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Thenable:
            if _has_method(subclass, 'then') and \
                    _has_method(subclass, 'result'):
                return True
        return NotImplemented


def is_thenable(value):
    """Check if an object can be chained, like a Promise, or is a "result".

    The promise module uses this function to differentiate "chainable" objects
    and direct return values, when using a callback who can returns both.

    Returns:
        boolean: True if the value has a callable 'then' and a callable
            'result'. False if not.
    """
    return isinstance(value, Thenable)


def as_values(returned):
    """Convert the value returned by a callback into an argument list.

    Args:
        returned: value returned by a callback. A tuple is already an
            argument list; None is an empty one. Any other value is a list
            of one element.
    Returns:
        tuple: the argument list.
    """
    if returned is None:
        return ()
    if isinstance(returned, tuple):
        return returned
    return (returned,)


def pass_through(*values):
    """Default error handler: transmit the rejection to the next link."""
    return values
