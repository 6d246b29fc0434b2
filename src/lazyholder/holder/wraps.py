from __future__ import annotations

"""Decorator that turns a class into a ``Holder`` of its single instance."""

import typing as t

from .base import Holder
from .types import InitStrategy

ObjT = t.TypeVar("ObjT")


@t.overload
def held(
    obj_cls: t.Type[ObjT],
    strategy: t.Union[InitStrategy, str] = InitStrategy.double_checked,
    name: t.Optional[str] = None,
    args: t.Optional[t.List[t.Any]] = None,
    kwargs: t.Optional[t.Dict[str, t.Any]] = None,
) -> Holder[ObjT]:
    ...


@t.overload
def held(
    **kwargs: t.Any,
) -> t.Callable[[t.Type[ObjT]], Holder[ObjT]]:
    ...


def held(
    obj_cls: t.Optional[t.Type[ObjT]] = None,
    strategy: t.Union[InitStrategy, str] = InitStrategy.double_checked,
    name: t.Optional[str] = None,
    args: t.Optional[t.List[t.Any]] = None,
    kwargs: t.Optional[t.Dict[str, t.Any]] = None,
) -> t.Union[t.Callable[[t.Type[ObjT]], Holder[ObjT]], Holder[ObjT]]:
    """Return a ``Holder`` for ``obj_cls``; usable bare or with options.

    >>> @held(strategy='lazy_locked')
    ... class Registry: ...
    >>> Registry.acquire() is Registry.acquire()
    True
    """

    if obj_cls is not None:
        return Holder(obj_cls, strategy=strategy, name=name, args=args, kwargs=kwargs)

    def wrapper(inner_cls: t.Type[ObjT]) -> Holder[ObjT]:
        return Holder(inner_cls, strategy=strategy, name=name, args=args, kwargs=kwargs)

    return wrapper


__all__ = ["held"]
