"""
Centralized exception hierarchy for winsdkenv.

Every error surfaced to the command line derives from WinSDKEnvError so the
CLI can report it with a single handler.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class WinSDKEnvError(Exception):
    """Base exception for all winsdkenv errors."""

    pass


# ============================================================================
# Discovery Exceptions
# ============================================================================


class SDKNotFoundError(WinSDKEnvError):
    """Raised when no SDK installation root or version can be found."""

    pass


class StoreReadError(WinSDKEnvError):
    """Raised when the configuration store exists but cannot be queried."""

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)


# ============================================================================
# Materialization Exceptions
# ============================================================================


class EnvironmentVariableError(WinSDKEnvError):
    """Raised when a process environment variable cannot be read or written."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class CopyError(WinSDKEnvError):
    """Raised when copying a present source file fails."""

    pass


class LaunchError(WinSDKEnvError):
    """Raised when the interactive shell cannot be launched. Always fatal."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(WinSDKEnvError):
    """Configuration parsing or validation error."""

    pass
