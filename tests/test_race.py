import pytest

from lazyholder.holder import InitStrategy
from lazyholder.race import Counter, Gadget, RaceResult, run_race


@pytest.mark.parametrize("strategy", [s for s in InitStrategy if s.is_thread_safe])
def test_thread_safe_strategies_produce_single_instance(strategy: InitStrategy) -> None:
    result = run_race(strategy, threads=100, delay=0.001)

    assert result.strategy is strategy
    assert result.threads == 100
    assert result.constructions == 1
    assert result.distinct_instances == 1
    assert result.partial_reads == 0
    assert result.errors == 0
    assert result.is_single


def test_unlocked_lazy_strategy_still_returns_complete_instances() -> None:
    result = run_race("lazy", threads=20, delay=0.005)

    assert result.constructions >= 1
    assert 1 <= result.distinct_instances <= result.constructions
    assert result.partial_reads == 0


def test_single_thread_race() -> None:
    assert run_race(threads=1).is_single


def test_race_rejects_zero_threads() -> None:
    with pytest.raises(ValueError):
        run_race(threads=0)


def test_gadget_sets_every_field(counter: Counter) -> None:
    gadget = Gadget(counter)

    assert gadget.complete
    assert (gadget.alpha, gadget.beta, gadget.gamma, gadget.delta) == (1, 2, 3, 4)
    assert gadget.serial == counter.value == 1


def test_gadget_missing_field_is_incomplete(counter: Counter) -> None:
    gadget = Gadget(counter)
    del gadget.delta

    assert not gadget.complete


def test_race_result_summary() -> None:
    result = RaceResult(strategy="lazy_locked", threads=8, constructions=1, distinct_instances=1)

    assert result.summary() == "lazy_locked: threads=8 constructions=1 distinct=1 partial=0 errors=0"
    assert not RaceResult(strategy="lazy", threads=8, constructions=2, distinct_instances=2).is_single
