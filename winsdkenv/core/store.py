"""
Read-only access to the configuration store holding SDK installation metadata.

On Windows the store is the registry. The interface is kept to the two
queries discovery needs so that tests can substitute an in-memory store.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import List

from .exceptions import StoreReadError
from .platform import error_code, format_os_error

if sys.platform == "win32":
    import winreg

logger = logging.getLogger(__name__)


class ConfigurationStore(ABC):
    """
    Abstract read-only view over a hierarchical key/value store.

    Keys are backslash-separated paths relative to the store's root.
    """

    @abstractmethod
    def read_value(self, key: str, name: str) -> str:
        """
        Read a named string value under a key.

        Args:
            key: Key path
            name: Value name

        Returns:
            The string value

        Raises:
            KeyError: If the key opens but the value is absent
            StoreReadError: If the key cannot be opened or read
        """
        pass

    @abstractmethod
    def enum_subkeys(self, key: str) -> List[str]:
        """
        Enumerate the names of the direct sub-keys of a key.

        The order is whatever the store yields; callers must not assume it is
        sorted.

        Args:
            key: Key path

        Returns:
            Sub-key names (empty list if there are none)

        Raises:
            StoreReadError: If the key cannot be opened or enumerated
        """
        pass


class RegistryStore(ConfigurationStore):
    """Windows registry reader rooted at HKEY_LOCAL_MACHINE."""

    def __init__(self, hive=None):
        if sys.platform != "win32":
            raise StoreReadError("The Windows registry is not available on this platform")
        self.hive = hive if hive is not None else winreg.HKEY_LOCAL_MACHINE

    def read_value(self, key: str, name: str) -> str:
        logger.debug(f"Reading registry value {key}\\{name}")
        try:
            with winreg.OpenKey(self.hive, key, 0, winreg.KEY_READ) as hkey:
                try:
                    value, value_type = winreg.QueryValueEx(hkey, name)
                except FileNotFoundError:
                    raise KeyError(name)
        except OSError as e:
            raise StoreReadError(
                format_os_error(e, f"Failed to read registry key '{key}'"),
                code=error_code(e),
            )

        if value_type not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
            raise StoreReadError(
                f"Registry value '{key}\\{name}' is not a string (type {value_type})"
            )
        if value_type == winreg.REG_EXPAND_SZ:
            value = winreg.ExpandEnvironmentStrings(value)
        return value

    def enum_subkeys(self, key: str) -> List[str]:
        logger.debug(f"Enumerating registry sub-keys of {key}")
        try:
            with winreg.OpenKey(self.hive, key, 0, winreg.KEY_READ) as hkey:
                count, _, _ = winreg.QueryInfoKey(hkey)
                return [winreg.EnumKey(hkey, index) for index in range(count)]
        except OSError as e:
            raise StoreReadError(
                format_os_error(e, f"Failed to enumerate registry key '{key}'"),
                code=error_code(e),
            )


__all__ = [
    "ConfigurationStore",
    "RegistryStore",
]
