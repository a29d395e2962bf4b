"""
Configuration management for winsdkenv.
"""

from .parser import (
    DEFAULT_CONFIG_NAME,
    WinSDKEnvConfig,
    load_config,
    parse_config,
)
from ..core.exceptions import ConfigError

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "WinSDKEnvConfig",
    "load_config",
    "parse_config",
    "ConfigError",
]
