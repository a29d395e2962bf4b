"""
winsdkenv/sdk/locator.py

Windows SDK discovery - finds the installed Windows 10 SDK root and the
version labels installed beneath it.

The registry enumerates versions in no particular order. The default
selection policy takes the first enumerated version, which is NOT guaranteed
to be the newest one; the 'latest' policy sorts by version number instead.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from packaging import version as pkg_version

from ..core.exceptions import ConfigError, SDKNotFoundError
from ..core.store import ConfigurationStore

logger = logging.getLogger(__name__)

INSTALLED_ROOTS_KEY = "SOFTWARE\\Microsoft\\Windows Kits\\Installed Roots"
KITS_ROOT_VALUE = "KitsRoot10"

VERSION_POLICIES = ("first", "latest")


@dataclass
class SdkInstallation:
    """
    Result of one discovery pass.

    Attributes:
        root: Installation root directory
        versions: Installed version labels in enumeration order
    """

    root: str
    versions: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        """String representation."""
        return f"Windows SDK at {self.root} ({len(self.versions)} version(s))"


def locate_installation_root(store: ConfigurationStore) -> str:
    """
    Query the store for the Windows 10 SDK installation root.

    Args:
        store: Configuration store to query

    Returns:
        Installation root directory

    Raises:
        SDKNotFoundError: If the root value is absent
        StoreReadError: If the key cannot be opened or read
    """
    try:
        root = store.read_value(INSTALLED_ROOTS_KEY, KITS_ROOT_VALUE)
    except KeyError:
        raise SDKNotFoundError(
            f"Windows SDK not found: no '{KITS_ROOT_VALUE}' value under "
            f"'{INSTALLED_ROOTS_KEY}'"
        )

    logger.debug(f"Windows SDK installation root: {root}")
    return root


def list_versions(store: ConfigurationStore) -> List[str]:
    """
    Enumerate the installed SDK versions.

    The order is the store's enumeration order; it is not sorted.

    Args:
        store: Configuration store to query

    Returns:
        Version labels (empty if none are installed)

    Raises:
        StoreReadError: If the key cannot be enumerated
    """
    versions = list(store.enum_subkeys(INSTALLED_ROOTS_KEY))
    logger.debug(f"Windows SDK versions: {versions}")
    return versions


def discover(store: ConfigurationStore) -> SdkInstallation:
    """Locate the installation root and enumerate its versions."""
    root = locate_installation_root(store)
    installation = SdkInstallation(root=root, versions=tuple(list_versions(store)))
    logger.debug(f"Discovered {installation}")
    return installation


def _version_key(label: str) -> Tuple[int, pkg_version.Version]:
    """Sort key placing unparsable labels below every valid version."""
    try:
        return (1, pkg_version.Version(label))
    except pkg_version.InvalidVersion:
        return (0, pkg_version.Version("0"))


def select_version(
    versions: List[str],
    policy: str = "first",
    requested: Optional[str] = None,
) -> str:
    """
    Choose the single SDK version used by every downstream operation.

    Args:
        versions: Version labels in enumeration order
        policy: 'first' (first enumerated) or 'latest' (highest version)
        requested: Explicit version label; overrides the policy

    Returns:
        Selected version label

    Raises:
        SDKNotFoundError: If no versions exist or the requested one is absent
        ConfigError: If the policy is unknown

    Example:
        >>> select_version(["10.0.1", "10.0.2"])
        '10.0.1'
        >>> select_version(["10.0.1", "10.0.2"], policy="latest")
        '10.0.2'
    """
    if policy not in VERSION_POLICIES:
        raise ConfigError(
            f"Invalid version policy: {policy} (expected one of {list(VERSION_POLICIES)})"
        )

    if not versions:
        raise SDKNotFoundError("No Windows SDK versions are installed")

    if requested:
        if requested not in versions:
            raise SDKNotFoundError(
                f"Windows SDK version {requested} is not installed "
                f"(available: {', '.join(versions)})"
            )
        selected = requested
    elif policy == "latest":
        selected = max(versions, key=_version_key)
    else:
        selected = versions[0]

    logger.debug(f"Selected Windows SDK version {selected} (policy: {policy})")
    return selected
