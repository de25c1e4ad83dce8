"""
Configuration System for namewise.

This module provides a small unified configuration interface backed by a
single JSON (or YAML) file, with environment variable overrides for the
values that are commonly set per process.
"""

import json
import os
import threading
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

from .constants import (
    DEFAULT_RANDOM_STRING_LENGTH,
    HOST_OS_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
)
from .logging import get_logger, setup_logging

try:
    import yaml

    YAML_AVAILABLE = True
except ImportError:
    YAML_AVAILABLE = False

logger = get_logger(__name__)

# json.JSONDecodeError is a ValueError
_LOAD_ERRORS = (OSError, ValueError) + ((yaml.YAMLError,) if YAML_AVAILABLE else ())


@dataclass
class PlatformConfig:
    """Host platform detection configuration."""

    host_os: Optional[str] = None
    memoize: bool = True


@dataclass
class NamingConfig:
    """Naming helper configuration."""

    random_string_length: int = DEFAULT_RANDOM_STRING_LENGTH


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "namewise.log"


class NamewiseConfig:
    """
    Unified configuration manager for namewise.

    Loads every section from one configuration file and applies
    environment variable overrides on top of it.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.platform = self._create_platform_config()
        self.naming = self._create_naming_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "namewise_config.yaml"
        json_config = config_dir / "namewise_config.json"

        if YAML_AVAILABLE and yaml_config.exists():
            return yaml_config
        else:
            return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"] and YAML_AVAILABLE:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except _LOAD_ERRORS as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

        if not isinstance(config_data, dict):
            logger.error(f"Configuration in {self.config_file} is not a mapping, using defaults")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_platform_config(self) -> PlatformConfig:
        """Create platform configuration from loaded data."""
        platform_data = self._config_data.get("platform", {})

        # Check environment variable override
        host_os = os.getenv(HOST_OS_ENV_VAR) or platform_data.get("host_os")

        return PlatformConfig(
            host_os=host_os,
            memoize=platform_data.get("memoize", True),
        )

    def _create_naming_config(self) -> NamingConfig:
        """Create naming configuration from loaded data."""
        naming_data = self._config_data.get("naming", {})

        return NamingConfig(
            random_string_length=naming_data.get(
                "random_string_length", DEFAULT_RANDOM_STRING_LENGTH
            ),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=os.getenv(LOG_LEVEL_ENV_VAR) or log_data.get("level", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "namewise.log"),
        )

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "namewise configuration",
            "platform": {
                "host_os": self.platform.host_os,
                "memoize": self.platform.memoize,
            },
            "naming": {
                "random_string_length": self.naming.random_string_length,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        try:
            with open(self.config_file, "w") as f:
                json.dump(config_data, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[NamewiseConfig] = None
_config_lock = threading.Lock()


def apply_logging_config(config: NamewiseConfig) -> None:
    """Configure the package logger from a configuration's logging section."""
    log_file = config.logging.log_file if config.logging.enable_file_logging else None
    setup_logging(config.logging.level, log_file)


def get_config() -> NamewiseConfig:
    """Get the global configuration instance."""
    global _global_config
    with _config_lock:
        if _global_config is None:
            _global_config = NamewiseConfig()
            apply_logging_config(_global_config)
        return _global_config


def set_config(config: Optional[NamewiseConfig]) -> None:
    """Set the global configuration instance. ``None`` forces a reload."""
    global _global_config
    with _config_lock:
        _global_config = config
        if config is not None:
            apply_logging_config(config)


def load_config(config_file: str) -> NamewiseConfig:
    """Load configuration from a specific file."""
    return NamewiseConfig(config_file)
