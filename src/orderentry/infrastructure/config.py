"""Runtime settings.

Values come from ``ORDERENTRY_*`` environment variables and fall back to
defaults.  CLI options override individual settings after loading.
Invalid values fail fast with ConfigurationError.
"""

from __future__ import annotations

import getpass
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from orderentry.application.prompting import PromptPolicy

ENV_PREFIX = "ORDERENTRY_"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off", "")


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    salesperson: str = "salesperson"
    max_attempts: int | None = None
    cancel_token: str | None = None
    release_stock_on_abort: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigurationError("max_attempts must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if not self.salesperson.strip():
            raise ConfigurationError("salesperson must not be empty")

    @property
    def prompt_policy(self) -> PromptPolicy:
        return PromptPolicy(
            max_attempts=self.max_attempts, cancel_token=self.cancel_token
        )

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        def get(key: str) -> str | None:
            value = env.get(ENV_PREFIX + key)
            return value.strip() if value is not None else None

        data_dir = get("DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            salesperson=get("SALESPERSON") or _default_salesperson(),
            max_attempts=_parse_int("MAX_ATTEMPTS", get("MAX_ATTEMPTS")),
            cancel_token=get("CANCEL_TOKEN") or None,
            release_stock_on_abort=_parse_bool(
                "RELEASE_STOCK_ON_ABORT", get("RELEASE_STOCK_ON_ABORT")
            ),
            log_level=(get("LOG_LEVEL") or "WARNING").upper(),
        )


def _default_salesperson() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "salesperson"


def _parse_int(key: str, value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid integer value for {ENV_PREFIX}{key}: {value}"
        )


def _parse_bool(key: str, value: str | None) -> bool:
    if value is None:
        return False
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"Invalid boolean value for {ENV_PREFIX}{key}: {value}")
