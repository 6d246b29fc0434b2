from __future__ import annotations

"""
Releases many threads at once on a fresh holder and counts what happened
"""

import threading
import time
import typing as t

from pydantic import BaseModel

from lazyholder.errors import ConstructionFailed
from lazyholder.holder import Holder, InitStrategy
from lazyholder.logging import logger


class Counter:
    """Thread-safe counter"""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        return self._value


class Gadget:
    """Payload whose fields are set one after another during construction."""

    FIELDS = ('alpha', 'beta', 'gamma', 'delta')

    def __init__(self, counter: Counter, delay: float = 0.0) -> None:
        self.serial = counter.increment()
        self.alpha = 1
        if delay: time.sleep(delay)
        self.beta = 2
        self.gamma = 3
        if delay: time.sleep(delay)
        self.delta = 4

    @property
    def complete(self) -> bool:
        return all(getattr(self, name, None) == i for i, name in enumerate(self.FIELDS, 1))


class RaceResult(BaseModel):
    strategy: InitStrategy
    threads: int
    constructions: int
    distinct_instances: int
    partial_reads: int = 0
    errors: int = 0

    @property
    def is_single(self) -> bool:
        return self.constructions == 1 and self.distinct_instances == 1 and self.errors == 0

    def summary(self) -> str:
        return (
            f"{self.strategy.value}: threads={self.threads} constructions={self.constructions} "
            f"distinct={self.distinct_instances} partial={self.partial_reads} errors={self.errors}"
        )


def run_race(
    strategy: t.Union[InitStrategy, str] = InitStrategy.double_checked,
    threads: int = 100,
    delay: float = 0.0,
    timeout: t.Optional[float] = 30.0,
) -> RaceResult:
    """Start ``threads`` threads that each call ``acquire()`` once, all at the same time.

    Args:
        strategy: Strategy of the holder under test.
        threads: Number of concurrent first callers.  Must be at least 1.
        delay: Seconds the payload sleeps mid-construction, to widen the window
            in which an unsynchronized strategy can construct twice.
        timeout: Seconds to wait for each thread to finish.
    """
    if threads < 1:
        raise ValueError(f"threads must be at least 1, got {threads}")
    strategy = InitStrategy.parse(strategy)
    counter = Counter()
    holder: Holder[Gadget] = Holder(
        Gadget, strategy = strategy, name = f'race-{strategy.value}', args = [counter], kwargs = {'delay': delay}
    )
    barrier = threading.Barrier(threads)
    results: t.List[t.Optional[Gadget]] = [None] * threads
    errors: t.List[ConstructionFailed] = []

    def worker(index: int) -> None:
        barrier.wait()
        try:
            results[index] = holder.acquire()
        except ConstructionFailed as e:
            errors.append(e)

    workers = [threading.Thread(target = worker, args = (i,), daemon = True) for i in range(threads)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join(timeout = timeout)

    seen = [r for r in results if r is not None]
    result = RaceResult(
        strategy = strategy,
        threads = threads,
        constructions = counter.value,
        distinct_instances = len({id(r) for r in seen}),
        partial_reads = sum(not r.complete for r in seen),
        errors = len(errors),
    )
    logger.debug(result.summary())
    return result


__all__ = ["Counter", "Gadget", "RaceResult", "run_race"]
