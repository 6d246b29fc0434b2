from __future__ import annotations

"""Single shared instance holders with selectable initialization strategies."""

from .base import Holder, InstanceT
from .types import EMPTY, InitStrategy
from .wraps import held

__all__ = [
    "Holder",
    "InstanceT",
    "EMPTY",
    "InitStrategy",
    "held",
]
