"""
Core functionality for winsdkenv.

This package contains the foundational modules the SDK locator and
environment materializer depend on.
"""

from .exceptions import (
    WinSDKEnvError,
    SDKNotFoundError,
    StoreReadError,
    EnvironmentVariableError,
    CopyError,
    LaunchError,
    ConfigError,
)

from .filesystem import copy_files

from .platform import (
    SUPPORTED_ARCHITECTURES,
    detect_architecture,
    format_os_error,
    is_windows,
    normalize_architecture,
)

from .process import ProcessEnvironment

from .store import (
    ConfigurationStore,
    RegistryStore,
)

__all__ = [
    "WinSDKEnvError",
    "SDKNotFoundError",
    "StoreReadError",
    "EnvironmentVariableError",
    "CopyError",
    "LaunchError",
    "ConfigError",
    "copy_files",
    "SUPPORTED_ARCHITECTURES",
    "detect_architecture",
    "format_os_error",
    "is_windows",
    "normalize_architecture",
    "ProcessEnvironment",
    "ConfigurationStore",
    "RegistryStore",
]
