"""Settings and logging setup for debvercmp."""

import logging
from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from rich.logging import RichHandler

from .exceptions import ConfigError

PACKAGE_LOGGER = "debvercmp"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Runtime settings, read from ``DEBVERCMP_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="DEBVERCMP_")

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"must be one of {', '.join(_LEVELS)}")
        return level


def load_settings(**overrides: Any) -> Settings:
    """Load settings from the environment, applying explicit overrides.

    Overrides whose value is None are ignored so unset command line options
    fall through to the environment.

    Args:
        **overrides: Setting values that take precedence over the environment.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If a setting is invalid.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid settings: {problems}") from e


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        settings: Settings providing the log level.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger
