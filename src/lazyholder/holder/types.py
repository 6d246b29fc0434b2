from __future__ import annotations

"""Initialization strategies understood by ``Holder``."""

import typing as t
from enum import Enum


class Constant(tuple):
    """Pretty display helper for immutable sentinel values."""

    def __new__(cls, name):
        return tuple.__new__(cls, (name,))

    def __repr__(self):
        return f'{self[0]}'


EMPTY = Constant('EMPTY')


class InitStrategy(str, Enum):
    """When the instance is built, and how ``acquire()`` synchronizes.

    - ``eager``: built with the holder, no lock on ``acquire()``.
    - ``lazy``: built on first ``acquire()``, no lock.  Two threads racing on
      the first call may both construct; use only from a single thread.
    - ``eager_locked``: built with the holder, lock taken on every call.
    - ``lazy_locked``: built on first ``acquire()``, lock taken on every call.
    - ``double_checked``: built on first ``acquire()``; the lock is only taken
      while no instance exists.
    """

    eager = 'eager'
    lazy = 'lazy'
    eager_locked = 'eager_locked'
    lazy_locked = 'lazy_locked'
    double_checked = 'double_checked'

    @property
    def is_eager(self) -> bool:
        return self in {InitStrategy.eager, InitStrategy.eager_locked}

    @property
    def is_locked(self) -> bool:
        """Whether every ``acquire()`` call takes the lock"""
        return self in {InitStrategy.eager_locked, InitStrategy.lazy_locked}

    @property
    def is_thread_safe(self) -> bool:
        return self is not InitStrategy.lazy

    @classmethod
    def parse(cls, value: t.Union[str, 'InitStrategy']) -> 'InitStrategy':
        """
        Accepts enum members, their values, or dashed names (``double-checked``)
        """
        if isinstance(value, cls): return value
        try:
            return cls(str(value).strip().lower().replace('-', '_'))
        except ValueError as e:
            choices = ', '.join(s.value for s in cls)
            raise ValueError(f"Unknown strategy: {value!r}. Expected one of: {choices}") from e


__all__ = ["Constant", "EMPTY", "InitStrategy"]
