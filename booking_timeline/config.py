"""
Centralized configuration with environment variable overrides.

The slot grid, the duration fallback and the demo admin password all live
here. Core timeline functions receive a ``GridConfig`` explicitly instead
of re-deriving business hours at each call site.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DEFAULT_ADMIN_PASSWORD = "demo123"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class GridConfig:
    """Business-day slot grid used by every timeline computation."""

    start_hour: int = _safe_int("GRID_START_HOUR", "8")
    end_hour: int = _safe_int("GRID_END_HOUR", "20")
    slot_interval_minutes: int = _safe_int("SLOT_INTERVAL_MINUTES", "30")
    default_duration_minutes: int = _safe_int("DEFAULT_DURATION_MINUTES", "60")

    @property
    def slots_per_hour(self) -> int:
        return MINUTES_PER_HOUR // self.slot_interval_minutes

    @property
    def slot_count(self) -> int:
        return (self.end_hour - self.start_hour) * self.slots_per_hour


@dataclass(frozen=True)
class AdminConfig:
    """Demo-only admin credentials."""

    password: str = os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)

    @property
    def uses_default_password(self) -> bool:
        return self.password == DEFAULT_ADMIN_PASSWORD


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    grid: GridConfig = field(default_factory=GridConfig)
    admin: AdminConfig = field(default_factory=AdminConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "booking-timeline")


def validate_grid(grid: GridConfig) -> None:
    """Reject grid shapes that would produce an empty or ragged slot sequence."""
    if not 0 <= grid.start_hour < HOURS_PER_DAY:
        raise ValueError(
            f"GRID_START_HOUR must be between 0 and 23, got {grid.start_hour}"
        )
    if not grid.start_hour < grid.end_hour <= HOURS_PER_DAY:
        raise ValueError(
            f"GRID_END_HOUR must be after GRID_START_HOUR and <= 24, got {grid.end_hour}"
        )
    if grid.slot_interval_minutes < 1 or MINUTES_PER_HOUR % grid.slot_interval_minutes:
        raise ValueError(
            "SLOT_INTERVAL_MINUTES must be a positive divisor of 60, "
            f"got {grid.slot_interval_minutes}"
        )
    if grid.default_duration_minutes < 1:
        raise ValueError(
            "DEFAULT_DURATION_MINUTES must be >= 1, "
            f"got {grid.default_duration_minutes}"
        )


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    validate_grid(config.grid)
    if not config.admin.password:
        raise ValueError("ADMIN_PASSWORD must not be empty")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"LOG_LEVEL is not a logging level: {config.log_level!r}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info(
        "Configuration loaded for '%s' (grid %02d:00-%02d:00, %d-minute slots)",
        config.app_name,
        config.grid.start_hour,
        config.grid.end_hour,
        config.grid.slot_interval_minutes,
    )
    return config


# Singleton instance
settings = load_config()
