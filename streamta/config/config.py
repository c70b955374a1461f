"""
Configuration management for streamta.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_PERIOD_TYPE,
    DEFAULT_UNSAFE_PERFORMANCE,
    DEFAULT_VALUE_TYPE,
    parse_bool,
    validate_period_type,
    validate_value_type,
)


@dataclass
class BuildConfig:
    """
    Build-time numeric configuration.

    Read once on first import. Changing the environment afterwards has no
    effect on already imported modules:

    value_type:
        f32 or f64. Precision of every Value flowing through windows and
        indicators.
    period_type:
        u8, u16, u32 or u64. Width of window lengths; a period larger than
        the width can hold is rejected at construction.
    unsafe_performance:
        Select UnsafeSlidingWindow as the default window. Skips validity
        checks in the push/evict path. Off unless explicitly enabled.
    """
    value_type: str = DEFAULT_VALUE_TYPE
    period_type: str = DEFAULT_PERIOD_TYPE
    unsafe_performance: bool = DEFAULT_UNSAFE_PERFORMANCE

    def __post_init__(self):
        """Validate and normalize configuration."""
        self.value_type = validate_value_type(self.value_type)
        self.period_type = validate_period_type(self.period_type)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: Optional[str] = None


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.build = self._load_build_config()
        self.log = self._load_log_config()

        self._initialized = True

    def _load_build_config(self) -> BuildConfig:
        """Load numeric build configuration from environment."""
        return BuildConfig(
            value_type=os.getenv("STREAMTA_VALUE_TYPE", DEFAULT_VALUE_TYPE),
            period_type=os.getenv("STREAMTA_PERIOD_TYPE", DEFAULT_PERIOD_TYPE),
            unsafe_performance=parse_bool(
                os.getenv("STREAMTA_UNSAFE_PERFORMANCE", str(DEFAULT_UNSAFE_PERFORMANCE))
            ),
        )

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR") or None,
        )

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        window = "unsafe" if self.build.unsafe_performance else "safe"
        return (
            f"streamta | value={self.build.value_type} | "
            f"period={self.build.period_type} | window={window}"
        )


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config instance so the next get_config() reloads it."""
    Config._instance = None
