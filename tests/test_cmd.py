from typer.testing import CliRunner

from lazyholder.cmd import cmd

runner = CliRunner()


def test_demo_prints_five_labels() -> None:
    result = runner.invoke(cmd, ["demo"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "SingletonEager",
        "SingletonLazy",
        "SingletonEagerThreadSafe",
        "SingletonLazyThreadSafe",
        "SingletonBestPractise",
    ]


def test_race_reports_single_construction() -> None:
    result = runner.invoke(cmd, ["race", "-s", "double_checked", "-n", "25", "-d", "0"])

    assert result.exit_code == 0, result.output
    assert "double_checked: threads=25 constructions=1 distinct=1" in result.output


def test_race_uses_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("LAZYHOLDER_STRATEGY", "lazy_locked")
    monkeypatch.setenv("LAZYHOLDER_RACE_THREADS", "12")
    monkeypatch.setenv("LAZYHOLDER_RACE_DELAY", "0")

    result = runner.invoke(cmd, ["race"])

    assert result.exit_code == 0, result.output
    assert "lazy_locked: threads=12 constructions=1" in result.output


def test_strategies_lists_thread_safety() -> None:
    result = runner.invoke(cmd, ["strategies"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 5
    assert lines[1].split() == ["lazy", "lazy", "not", "thread-safe"]
    assert lines[4].split() == ["double_checked", "lazy", "thread-safe"]


def test_unknown_log_level_exits_with_usage_error() -> None:
    result = runner.invoke(cmd, ["--log-level", "loud", "demo"])

    assert result.exit_code == 2
    assert "Unknown log level: LOUD" in result.output


def test_invalid_settings_exit_with_usage_error(monkeypatch) -> None:
    monkeypatch.setenv("LAZYHOLDER_STRATEGY", "bogus")

    result = runner.invoke(cmd, ["strategies"])

    assert result.exit_code == 2
    assert "Invalid settings" in result.output
    assert "Unknown strategy: 'bogus'" in result.output
