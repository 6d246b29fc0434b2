import sys
import threading
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from lazyholder.configs import reset_settings
from lazyholder.race import Counter


class CountingLock:
    """Lock stand-in that records how many callers have reached it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cond = threading.Condition()
        self.entered = 0

    def __enter__(self) -> "CountingLock":
        with self._cond:
            self.entered += 1
            self._cond.notify_all()
        self._lock.acquire()
        return self

    def __exit__(self, *exc) -> None:
        self._lock.release()

    def wait_for(self, count: int, timeout: float = 5.0) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: self.entered >= count, timeout)


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def counting_lock() -> CountingLock:
    return CountingLock()


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()
