"""
Runtime Configuration Module

Provides configuration loading and management for ctlog.
"""

from .runtime import (
    KeyConfig,
    LoggingConfig,
    RuntimeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "KeyConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
]
