from __future__ import annotations

"""Holder that owns one shared instance and builds it on first use.

Publication of the instance is a single attribute assignment made only after
the factory has returned, so a reader on the unlocked fast path either sees
``EMPTY`` or a fully constructed object.  Attribute stores are atomic in
CPython, including the free-threaded build, and the lock release that follows
the store orders it before any later acquisition of the same lock.
"""

import threading
import typing as t

from lazyholder.errors import ConstructionFailed
from lazyholder.load import lazy_import
from lazyholder.logging import logger
from .types import EMPTY, InitStrategy

InstanceT = t.TypeVar('InstanceT')
FactoryT = t.Union[t.Type[InstanceT], t.Callable[..., InstanceT], str]


class Holder(t.Generic[InstanceT]):
    """Owns at most one instance of a payload and hands out shared references.

    >>> settings = Holder(Settings)
    >>> settings.acquire() is settings.acquire()
    True
    """

    def __init__(
        self,
        factory: FactoryT,
        strategy: t.Union[InitStrategy, str] = InitStrategy.double_checked,
        name: t.Optional[str] = None,
        args: t.Optional[t.Iterable[t.Any]] = None,
        kwargs: t.Optional[t.Dict[str, t.Any]] = None,
    ) -> None:
        """Create a holder.

        Args:
            factory: Class, callable, or ``"module:attribute"`` import string
                that builds the instance.  Import strings are resolved on the
                first construction.
            strategy: When to construct and how ``acquire()`` synchronizes.
            name: Used in logs and errors.  Defaults to the factory's name.
            args: Positional arguments forwarded to the factory.
            kwargs: Keyword arguments forwarded to the factory.

        Raises:
            ConstructionFailed: With an eager strategy, when the factory fails.
        """
        assert factory is not None, "`factory` must be provided"
        self._factory = factory
        self._args = tuple(args or ())
        self._kwargs = dict(kwargs or {})
        self._strategy = InitStrategy.parse(strategy)
        self._name = name or _factory_name(factory)
        self._lock = threading.Lock()
        self._instance: t.Union[InstanceT, t.Any] = EMPTY
        self._constructions = 0
        self._failures = 0
        self._last_error: t.Optional[BaseException] = None
        if self._strategy.is_eager:
            self._instance = self._construct()

    @property
    def name(self) -> str:
        return self._name

    @property
    def strategy(self) -> InitStrategy:
        return self._strategy

    @property
    def initialized(self) -> bool:
        return self._instance is not EMPTY

    @property
    def constructions(self) -> int:
        """Number of successful constructions since the holder was created"""
        return self._constructions

    def acquire(self) -> InstanceT:
        """Return the shared instance, constructing it if it does not exist yet.

        Raises:
            ConstructionFailed: The factory raised.  Callers that were blocked
                behind the failing attempt receive the same cause; the holder
                stays uninitialized so a later call retries.
        """
        if self._strategy is InitStrategy.lazy:
            instance = self._instance
            if instance is EMPTY:
                instance = self._construct()
                self._instance = instance
            return instance

        if self._strategy.is_locked:
            seen = self._failures
            with self._lock:
                return self._acquire_locked(seen)

        # double_checked, and eager (only empty after a failed rebuild in ``reset``)
        instance = self._instance
        if instance is not EMPTY:
            return instance
        seen = self._failures
        with self._lock:
            return self._acquire_locked(seen)

    def reset(self) -> None:
        """Drop the instance; eager holders rebuild it immediately."""
        with self._lock:
            self._instance = EMPTY
            logger.for_holder(self._name, 'reset').debug(f"Dropped instance ({self._strategy.value})")
            if self._strategy.is_eager:
                self._instance = self._construct()

    def substitute(self, instance: InstanceT) -> None:
        """Publish ``instance`` in place of the current one."""
        with self._lock:
            self._instance = instance
            logger.for_holder(self._name, 'substitute').debug(f"Substituted instance with {type(instance).__name__}")

    def _acquire_locked(self, seen: int) -> InstanceT:
        """Second check, made while holding the lock.

        ``seen`` is the failure count the caller observed before waiting on the
        lock.  If it moved, the attempt this caller queued behind has failed.
        """
        if self._instance is not EMPTY:
            return self._instance
        if self._failures != seen:
            raise ConstructionFailed(self._name, self._last_error, self._failures) from self._last_error
        instance = self._construct()
        self._instance = instance
        return instance

    def _construct(self) -> InstanceT:
        try:
            factory = lazy_import(self._factory)
            instance = factory(*self._args, **self._kwargs)
        except Exception as e:
            self._failures += 1
            self._last_error = e
            logger.for_holder(self._name, 'failed').warning(f"Construction attempt {self._failures} failed: {e!r}")
            raise ConstructionFailed(self._name, e, self._failures) from e
        self._constructions += 1
        logger.for_holder(self._name, 'construct').debug(
            f"Constructed {type(instance).__name__} ({self._strategy.value}, #{self._constructions})"
        )
        return instance

    def __repr__(self) -> str:
        state = 'initialized' if self.initialized else 'uninitialized'
        return f'<Holder {self._name!r} strategy={self._strategy.value} {state}>'


def _factory_name(factory: t.Any) -> str:
    if isinstance(factory, str):
        return factory.rsplit(':', 1)[-1]
    return getattr(factory, '__qualname__', None) or getattr(factory, '__name__', None) or repr(factory)


__all__ = ["Holder", "InstanceT", "FactoryT"]
