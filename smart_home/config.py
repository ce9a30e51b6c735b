"""
Configuration for SmartHome devices
===================================
Runtime settings for device simulation and energy reporting, loaded from
environment variables with sensible defaults.
Setups the logging configuration as well.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path

from smart_home.domain.exceptions import ConfigurationError

CONSOLE_HANDLER_NAME = "smarthome_console"
FILE_HANDLER_NAME = "smarthome_file"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number.") from None


def _env_optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("SMARTHOME_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("SMARTHOME_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("SMARTHOME_LOG_LEVEL", "INFO"))
    log_file: str | None = field(default_factory=lambda: _env_optional("SMARTHOME_LOG_FILE"))

    # Outlet voltage sensor
    nominal_voltage: float = field(default_factory=lambda: _env_float("SMARTHOME_NOMINAL_VOLTAGE", 220.0))
    voltage_oscillation: float = field(default_factory=lambda: _env_float("SMARTHOME_VOLTAGE_OSCILLATION", 2.0))
    voltage_jitter: float = field(default_factory=lambda: _env_float("SMARTHOME_VOLTAGE_JITTER", 1.0))

    # Energy reporting
    electricity_rate_kwh: float = field(default_factory=lambda: _env_float("SMARTHOME_ELECTRICITY_RATE_KWH", 0.12))
    power_alert_watts: float = field(default_factory=lambda: _env_float("SMARTHOME_POWER_ALERT_WATTS", 2000.0))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}", detail={"field": "log_level", "value": self.log_level}
            )
        if self.nominal_voltage <= 0:
            raise ConfigurationError(
                "Nominal voltage must be positive", detail={"field": "nominal_voltage", "value": self.nominal_voltage}
            )
        for name in ("voltage_oscillation", "voltage_jitter", "electricity_rate_kwh", "power_alert_watts"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative", detail={"field": name, "value": value})

    @property
    def resolved_log_level(self) -> int:
        if self.DEBUG:
            return logging.DEBUG
        return logging.getLevelName(self.log_level.upper())


def setup_logging(debug: bool = False, log_file: str | None = None, level: int | None = None) -> None:
    """Setup logging configuration.

    Safe to call more than once: the named console/file handlers are only
    added the first time and have their level refreshed afterwards.
    """
    log_level = level if level is not None else (logging.DEBUG if debug else logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)

    has_console = any(getattr(h, "name", "") == CONSOLE_HANDLER_NAME for h in root.handlers)
    has_file = any(getattr(h, "name", "") == FILE_HANDLER_NAME for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = CONSOLE_HANDLER_NAME
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = FILE_HANDLER_NAME
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    for handler in root.handlers:
        if getattr(handler, "name", "") in {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}:
            handler.setLevel(log_level)

    if added_handler:
        root.info(f"Logging initialized at level: {logging.getLevelName(log_level)}")


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    return AppConfig()


def configure_logging(config: AppConfig) -> None:
    """Apply the logging settings held by ``config``."""
    setup_logging(log_file=config.log_file, level=config.resolved_log_level)
