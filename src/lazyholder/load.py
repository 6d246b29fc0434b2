from __future__ import annotations

"""Resolve ``"module:attribute"`` import strings used as holder factories."""

import functools
import importlib
import typing as t

_resolved: dict[str, t.Any] = {}


class ImportFromStringError(Exception):
    """Raised when an import string does not name a reachable object."""

    def __init__(self, import_str: str, reason: str) -> None:
        super().__init__(f'Cannot resolve "{import_str}": {reason}')
        self.import_str = import_str
        """The import string that failed"""


def _split(import_str: str) -> t.Tuple[str, t.List[str]]:
    module_name, sep, attr_path = import_str.strip().partition(":")
    attrs = [a for a in attr_path.split(".") if a] if sep else []
    if not module_name or not attrs:
        raise ImportFromStringError(import_str, 'expected "<module>:<attribute>[.<attribute>...]"')
    return module_name, attrs


def import_from_string(import_str: t.Any) -> t.Any:
    """Return the object named by ``import_str``; non-strings pass through.

    >>> import_from_string("os:path.join") is os.path.join
    True
    """
    if not isinstance(import_str, str):
        return import_str

    module_name, attrs = _split(import_str)
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        # A missing dependency of the module is a real error, not a bad string
        if exc.name != module_name:
            raise
        raise ImportFromStringError(import_str, f'no module named "{module_name}"') from exc

    try:
        return functools.reduce(getattr, attrs, module)
    except AttributeError as exc:
        raise ImportFromStringError(import_str, f'"{module_name}" has no attribute path "{".".join(attrs)}"') from exc


def lazy_import(import_str: t.Any) -> t.Any:
    """Like ``import_from_string``, but each string is resolved once per process."""
    if not isinstance(import_str, str):
        return import_str
    if import_str not in _resolved:
        _resolved[import_str] = import_from_string(import_str)
    return _resolved[import_str]


__all__ = ["ImportFromStringError", "import_from_string", "lazy_import"]
