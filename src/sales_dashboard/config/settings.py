"""
Configuration loading and management for the sales dashboard core.

This module provides utilities for loading configuration from a JSON file
or from environment variables, with in-memory defaults as the last resort.
"""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .models import DashboardConfig

logger = logging.getLogger(__name__)

ENV_CONFIG_FILE = "SALES_DASHBOARD_CONFIG_FILE"

# Environment variable -> DashboardConfig field
ENV_VARS = {
    "SALES_DASHBOARD_SEED": "seed",
    "SALES_DASHBOARD_LOG_LEVEL": "log_level",
    "SALES_DASHBOARD_DEFAULT_METRIC": "default_metric",
    "SALES_DASHBOARD_DEFAULT_REGION": "default_region",
}


def load_config(
    config_path: str | Path | None = None, config_name: str = "config.json"
) -> DashboardConfig:
    """
    Load configuration from file with path resolution.

    Args:
        config_path: Explicit path to config file or directory containing config
        config_name: Name of config file (default: "config.json")

    Returns:
        DashboardConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If no configuration file is found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / config_name,
            Path.cwd() / "config" / config_name,
        ]

        for path in search_paths:
            if path.exists():
                config_path = path
                break
        else:
            raise FileNotFoundError(
                f"Configuration file '{config_name}' not found in any of: "
                f"{[str(p) for p in search_paths]}"
            )

    config_path = Path(config_path)

    # If path is a directory, look for config file inside it
    if config_path.is_dir():
        config_path = config_path / config_name

    return DashboardConfig.from_file(config_path)


def get_config_from_env() -> DashboardConfig | None:
    """
    Try to load configuration from environment variables.

    Returns:
        DashboardConfig if environment variables are set, None otherwise

    Raises:
        ValueError: If an environment variable holds an invalid value
    """
    config_file_env = os.getenv(ENV_CONFIG_FILE)
    if config_file_env:
        return load_config(config_file_env)

    env_values = {key: os.getenv(key) for key in ENV_VARS}
    if not any(env_values.values()):
        return None

    config_data: dict[str, object] = {}
    for env_name, field_name in ENV_VARS.items():
        value = env_values[env_name]
        if value:
            config_data[field_name] = value.strip()

    try:
        if "seed" in config_data:
            config_data["seed"] = int(config_data["seed"])
        return DashboardConfig(**config_data)
    except (ValueError, TypeError, ValidationError) as e:
        raise ValueError(f"Invalid environment variable configuration: {e}")


def load_config_with_fallback(
    config_path: str | Path | None = None,
) -> DashboardConfig:
    """
    Load configuration with fallback to environment variables and defaults.

    Priority order:
    1. Explicit config file path
    2. Environment variable SALES_DASHBOARD_CONFIG_FILE
    3. Individual SALES_DASHBOARD_* environment variables
    4. Default locations (config.json, config/config.json)
    5. In-memory defaults

    Args:
        config_path: Optional explicit path to config file

    Returns:
        DashboardConfig: Loaded configuration
    """
    if config_path:
        try:
            return load_config(config_path)
        except FileNotFoundError:
            logger.warning(f"Config file {config_path} not found, trying fallbacks")

    env_config = get_config_from_env()
    if env_config:
        return env_config

    try:
        return load_config()
    except FileNotFoundError:
        pass

    logger.info("No configuration found, using defaults")
    return DashboardConfig()
