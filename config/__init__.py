"""
Sudoku Solver Configuration Module

This module provides centralized configuration management with error handling
and fallback mechanisms.
"""

import os
import copy
import json
import logging
from typing import Any, Dict, Optional

from .default_fallbacks import DEFAULT_CONFIG
from utils.error_handling import ConfigError

# Configure logging
logger = logging.getLogger(__name__)

# Global configuration dictionary
_config: Dict[str, Any] = {}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge user settings into defaults."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file with fallback to default values.

    Args:
        config_path: Path to configuration file (JSON format)

    Returns:
        Dict containing configuration settings

    Raises:
        ConfigError: If configuration file exists but cannot be parsed
    """
    global _config

    # Start with default configuration
    _config = copy.deepcopy(DEFAULT_CONFIG)

    # If config path is provided, try to load it
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ConfigError(f"Configuration in {config_path} must be a JSON object")

            # Update default config with user settings
            _merge(_config, user_config)
            logger.info(f"Configuration loaded from {config_path}")

        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"Error loading config from {config_path}: {str(e)}")
            raise ConfigError(f"Failed to load configuration: {str(e)}") from e
    else:
        logger.debug("No configuration file provided or found, using defaults")

    return _config


def get_config() -> Dict[str, Any]:
    """
    Get the current configuration dictionary.

    Returns:
        Dict containing configuration settings
    """
    if not _config:
        return load_config()
    return _config


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a specific configuration setting with fallback.

    Args:
        key: Configuration key to retrieve
        default: Default value if key is not found

    Returns:
        Configuration value or default
    """
    config = get_config()

    # Support nested keys with dot notation (e.g., "solver.validate_solution")
    if '.' in key:
        parts = key.split('.')
        value = config
        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                logger.warning(f"Configuration key '{key}' not found, using default: {default}")
                return default
        return value

    return config.get(key, default)


def set_setting(key: str, value: Any) -> None:
    """
    Update a specific configuration setting.

    Args:
        key: Configuration key to update
        value: New value for the key
    """
    config = get_config()

    # Support nested keys with dot notation
    if '.' in key:
        parts = key.split('.')
        for part in parts[:-1]:
            if part not in config:
                config[part] = {}
            config = config[part]
        config[parts[-1]] = value
    else:
        config[key] = value

    logger.debug(f"Configuration updated: {key} = {value}")


def save_config(config_path: str) -> None:
    """
    Save current configuration to file.

    Args:
        config_path: Path to save configuration file

    Raises:
        ConfigError: If configuration cannot be saved
    """
    try:
        # Ensure directory exists
        directory = os.path.dirname(config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(config_path, 'w') as f:
            json.dump(get_config(), f, indent=4)

        logger.info(f"Configuration saved to {config_path}")

    except (IOError, OSError) as e:
        logger.error(f"Failed to save configuration to {config_path}: {str(e)}")
        raise ConfigError(f"Failed to save configuration: {str(e)}") from e


def initialize_settings(config_path: Optional[str] = None):
    """Shortcut for settings.initialize_settings."""
    from .settings import initialize_settings as _initialize
    return _initialize(config_path)


def get_settings():
    """Shortcut for settings.get_settings."""
    from .settings import get_settings as _get
    return _get()
