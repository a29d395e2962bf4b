"""
Platform helpers for winsdkenv.

Features:
- Host OS detection (the SDK registry only exists on Windows)
- CPU architecture normalization to the SDK library directory names
- Rendering of OS errors the way Windows reports them

Usage:
    from winsdkenv.core.platform import is_windows, detect_architecture

    if is_windows():
        print(f"Host architecture: {detect_architecture()}")
"""

import platform
import sys
from typing import Optional

# Architectures that have a library directory under Lib\<version>\<leaf>\<arch>
SUPPORTED_ARCHITECTURES = ("x64", "x86", "arm64", "arm")


def is_windows() -> bool:
    """Return True when running on Windows."""
    return sys.platform == "win32"


def normalize_architecture(machine: str) -> str:
    """
    Normalize a machine name to the SDK's architecture directory name.

    Args:
        machine: Machine name as reported by the OS (e.g. 'AMD64', 'aarch64')

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm', or the
        lower-cased input for anything unrecognized

    Example:
        >>> normalize_architecture("AMD64")
        'x64'
    """
    machine = machine.lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        return machine


def detect_architecture() -> str:
    """Detect the host CPU architecture as an SDK directory name."""
    return normalize_architecture(platform.machine())


def format_os_error(error: OSError, context: Optional[str] = None) -> str:
    """
    Render an OSError with its platform error code and description.

    Windows errors carry ``winerror`` and are shown as
    ``Win32 Error <code> - <message>``; other errors fall back to errno.

    Args:
        error: The error raised by the OS
        context: Optional prefix describing what was being attempted

    Returns:
        Human-readable message

    Example:
        >>> format_os_error(PermissionError(13, "Permission denied"))
        'Error 13 - Permission denied'
    """
    code = getattr(error, "winerror", None)
    description = error.strerror or str(error)

    if code is not None:
        message = f"Win32 Error {code} - {description}"
    elif error.errno is not None:
        message = f"Error {error.errno} - {description}"
    else:
        message = description

    if context:
        return f"{context}: {message}"
    return message


def error_code(error: OSError) -> Optional[int]:
    """Return the Windows error code if present, otherwise errno."""
    code = getattr(error, "winerror", None)
    return code if code is not None else error.errno
