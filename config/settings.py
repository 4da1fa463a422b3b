"""
Sudoku Solver Settings Module

This module handles loading, validating, and providing access to system settings.
"""

import logging
from typing import Any, Dict, Optional

from .default_fallbacks import VALID_LOG_LEVELS
from utils.error_handling import ConfigError

# Configure logging
logger = logging.getLogger(__name__)

class Settings:
    """
    Centralized settings management with validation.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize settings with config from file or defaults.

        Args:
            config_path: Path to configuration file (optional)
        """
        # Import here to avoid circular imports
        from . import load_config

        self._config = load_config(config_path)
        self._validate_config()

    def _validate_config(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigError: If configuration contains invalid values
        """
        log_level = str(self.get("system.log_level", "INFO")).upper()
        if log_level not in VALID_LOG_LEVELS:
            logger.error(f"Invalid log level: {log_level}")
            raise ConfigError(
                f"Invalid configuration: system.log_level must be one of {VALID_LOG_LEVELS}",
                {"log_level": log_level}
            )
        self.set("system.log_level", log_level)

        repeats = self.get("benchmark.repeats")
        if not isinstance(repeats, int) or repeats < 1:
            logger.error(f"Invalid benchmark repeat count: {repeats}")
            raise ConfigError(f"Invalid configuration: benchmark.repeats ({repeats}) must be >= 1")

        cell_size = self.get("renderer.figure_cell_size")
        if not isinstance(cell_size, (int, float)) or cell_size <= 0:
            logger.error(f"Invalid figure cell size: {cell_size}")
            raise ConfigError(f"Invalid configuration: renderer.figure_cell_size ({cell_size}) must be > 0")

        delimiter = self.get("parser.delimiter")
        if not isinstance(delimiter, str) or len(delimiter) == 0:
            raise ConfigError("Invalid configuration: parser.delimiter must be a non-empty string")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value with dot notation support.

        Args:
            key: Configuration key (e.g., "system.log_level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        # Import here to avoid circular imports
        from . import get_setting
        return get_setting(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value with dot notation support.

        Args:
            key: Configuration key (e.g., "system.log_level")
            value: New value to set
        """
        # Import here to avoid circular imports
        from . import set_setting
        set_setting(key, value)

    def get_all(self) -> Dict[str, Any]:
        """
        Get the complete configuration dictionary.

        Returns:
            Dict with all configuration settings
        """
        return self._config

    def get_nested(self, section: str) -> Dict[str, Any]:
        """
        Get all settings within a section.

        Args:
            section: Section name (e.g., "system", "solver")

        Returns:
            Dict with section settings or empty dict if section not found
        """
        return self._config.get(section, {})

    def is_debug_mode(self) -> bool:
        """
        Check if system is in debug mode.

        Returns:
            True if in debug mode, False otherwise
        """
        return bool(self.get("system.debug_mode", False))

    def log_level(self) -> int:
        """Numeric logging level for system.log_level."""
        if self.is_debug_mode():
            return logging.DEBUG
        return getattr(logging, self.get("system.log_level", "INFO"))


# Global settings instance
_settings: Optional[Settings] = None


def initialize_settings(config_path: Optional[str] = None) -> Settings:
    """
    Initialize global settings instance.

    Args:
        config_path: Path to configuration file

    Returns:
        Settings instance
    """
    global _settings
    _settings = Settings(config_path)
    return _settings


def get_settings() -> Settings:
    """
    Get global settings instance, initializing if necessary.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = initialize_settings()
    return _settings
