from __future__ import annotations

"""
lazyholder: a single shared instance, built eagerly or lazily, with or without locks.

>>> from lazyholder import Holder
>>> cache = Holder(dict)
>>> cache.acquire() is cache.acquire()
True
"""

from .version import VERSION
from .errors import HolderError, ConstructionFailed
from .holder import Holder, InitStrategy, held
from .configs import HolderSettings, get_settings

__version__ = VERSION

__all__ = [
    "VERSION",
    "HolderError",
    "ConstructionFailed",
    "Holder",
    "InitStrategy",
    "held",
    "HolderSettings",
    "get_settings",
]
