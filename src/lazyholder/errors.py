from __future__ import annotations

"""Exceptions raised by lazyholder."""

import typing as t


class HolderError(Exception):
    """Base class for errors raised by a ``Holder``."""


class ConstructionFailed(HolderError):
    """Raised when the factory of a ``Holder`` fails to build its instance.

    Every caller that was waiting on the same construction attempt receives a
    ``ConstructionFailed`` with the same ``cause`` and ``attempt``.
    """

    def __init__(self, name: str, cause: BaseException, attempt: int = 1) -> None:
        super().__init__(f"[{name}] Construction attempt {attempt} failed: {cause!r}")
        self.name = name
        """Name of the holder whose factory failed"""

        self.cause = cause
        """The exception raised by the factory"""

        self.attempt = attempt
        """1-based count of failed attempts on the holder"""

    def __reduce__(self) -> t.Tuple[t.Any, ...]:
        return (type(self), (self.name, self.cause, self.attempt))


__all__ = ["HolderError", "ConstructionFailed"]
