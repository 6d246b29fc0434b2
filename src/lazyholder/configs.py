from __future__ import annotations

"""
lazyholder Settings Configuration
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from lazyholder.holder import Holder, InitStrategy
from lazyholder.logging import REVERSE_LOGLEVEL_MAPPING


class HolderSettings(BaseSettings):
    """
    lazyholder Settings

    Environment variables:
        LAZYHOLDER_STRATEGY: Default strategy used by the CLI
        LAZYHOLDER_LOG_LEVEL: Minimum level of the package logger
        LAZYHOLDER_RACE_THREADS: Default number of threads for ``lazyholder race``
        LAZYHOLDER_RACE_DELAY: Default construction delay for ``lazyholder race``
    """

    strategy: InitStrategy = InitStrategy.double_checked
    log_level: str = 'INFO'
    race_threads: int = Field(100, ge = 1)
    race_delay: float = Field(0.001, ge = 0.0)

    model_config = SettingsConfigDict(
        env_prefix = 'LAZYHOLDER_',
        case_sensitive = False,
    )

    @field_validator('strategy', mode = 'before')
    @classmethod
    def validate_strategy(cls, v: object) -> InitStrategy:
        return InitStrategy.parse(v)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in REVERSE_LOGLEVEL_MAPPING:
            raise ValueError(f"Unknown log level: {v}. Expected one of: {', '.join(REVERSE_LOGLEVEL_MAPPING)}")
        return v


_settings: Holder[HolderSettings] = Holder(HolderSettings, name = 'settings')


def get_settings() -> HolderSettings:
    """
    Returns the process-wide settings, read from the environment on first use
    """
    return _settings.acquire()


def reset_settings() -> None:
    """
    Forgets the current settings so the next ``get_settings()`` re-reads the environment
    """
    _settings.reset()


__all__ = ["HolderSettings", "get_settings", "reset_settings"]
