import pytest

from lazyholder.logging import change_logger_level, get_logger, logger
from lazyholder.logging.main import get_env_log_level


def test_default_logger_is_shared() -> None:
    assert get_logger() is logger
    assert get_logger("lazyholder") is logger
    assert logger.is_global


def test_named_logger_is_cached() -> None:
    named = get_logger("lazyholder.tests")

    assert named is not logger
    assert named.name == "lazyholder.tests"
    assert get_logger("lazyholder.tests") is named


def test_holder_binding_sets_extra() -> None:
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    try:
        logger.for_holder("settings", "construct").debug("built")
    finally:
        logger.remove(handler_id)

    assert records[0]["extra"] == {"holder": "settings", "event": "construct"}
    assert records[0]["message"] == "built"


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        change_logger_level("chatty")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "INFO"),
        ("debug", "DEBUG"),
        (" warning ", "WARNING"),
        ("loud", "INFO"),
        ("", "INFO"),
    ],
)
def test_env_log_level_falls_back_on_unknown(monkeypatch: pytest.MonkeyPatch, value, expected: str) -> None:
    if value is None:
        monkeypatch.delenv("LAZYHOLDER_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("LAZYHOLDER_LOG_LEVEL", value)

    assert get_env_log_level() == expected
