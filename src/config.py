"""Environment-driven configuration for the payments engine."""

import logging
import os
import sys
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class EngineConfig:
    log_level: int
    report_stats: bool


def load_config() -> EngineConfig:
    return EngineConfig(
        log_level=_get_log_level("PAYMENTS_LOG_LEVEL", logging.WARNING),
        report_stats=_get_bool("PAYMENTS_REPORT_STATS", False),
    )


def configure_logging(config: EngineConfig) -> None:
    # stdout carries the report, so logs always go to stderr
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _get_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_log_level(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return default
