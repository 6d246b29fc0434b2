from __future__ import annotations

import typing as t
from typer import Typer, echo, Option, Exit

from lazyholder.configs import get_settings
from lazyholder.errors import ConstructionFailed
from lazyholder.holder import InitStrategy
from lazyholder.logging import change_logger_level
from lazyholder.race import run_race
from lazyholder.variants import run_demo

# Singleton Demonstration Commands

cmd = Typer(no_args_is_help = True, help = "lazyholder CLI")


@cmd.callback()
def configure(
    log_level: t.Optional[str] = Option(None, '-l', '--log-level', help = "Minimum log level. Ex: DEBUG"),
):
    """
    Demonstrate single shared instance holders and their initialization strategies.
    """
    try:
        level = log_level or get_settings().log_level
    except ConstructionFailed as e:
        echo(f"Invalid settings: {e.cause}", err = True)
        raise Exit(code = 2) from e
    try:
        change_logger_level(level)
    except ValueError as e:
        echo(str(e), err = True)
        raise Exit(code = 2) from e


@cmd.command('demo', help = "Acquire each of the five variants and display its label")
def demo():
    """
    >>> lazyholder demo
    """
    run_demo()


@cmd.command('race', help = "Race many threads on the first acquire() of a fresh holder")
def race(
    strategy: t.Optional[InitStrategy] = Option(None, '-s', '--strategy', help = "Strategy of the holder under test"),
    threads: t.Optional[int] = Option(None, '-n', '--threads', min = 1, help = "Number of concurrent first callers"),
    delay: t.Optional[float] = Option(None, '-d', '--delay', min = 0.0, help = "Seconds the payload sleeps mid-construction"),
):
    """
    Exits with code 1 if a thread-safe strategy constructed more than once.

    >>> lazyholder race -s double_checked -n 100
    """
    settings = get_settings()
    strategy = strategy or settings.strategy
    result = run_race(
        strategy = strategy,
        threads = threads if threads is not None else settings.race_threads,
        delay = delay if delay is not None else settings.race_delay,
    )
    echo(result.summary())
    if result.is_single: return
    if strategy.is_thread_safe:
        echo(f"{strategy.value} did not produce a single instance", err = True)
        raise Exit(code = 1)
    echo(f"{strategy.value} is not thread safe", err = True)


@cmd.command('strategies', help = "List the initialization strategies")
def strategies():
    """
    >>> lazyholder strategies
    """
    for strategy in InitStrategy:
        when = 'eager' if strategy.is_eager else 'lazy'
        safety = 'thread-safe' if strategy.is_thread_safe else 'not thread-safe'
        echo(f'{strategy.value:<16}{when:<7}{safety}')
