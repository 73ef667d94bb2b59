"""Configuration models and loaders for the sales dashboard core."""

from .models import DashboardConfig, GenerationConfig, ValueRange
from .settings import get_config_from_env, load_config, load_config_with_fallback

__all__ = [
    "DashboardConfig",
    "GenerationConfig",
    "ValueRange",
    "load_config",
    "get_config_from_env",
    "load_config_with_fallback",
]
