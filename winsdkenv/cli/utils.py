"""
Shared utilities for CLI commands.

Provides the configuration merge and the discovery pass every operation
starts with.
"""

import logging
from typing import Tuple

from ..config.parser import WinSDKEnvConfig, load_config
from ..core.platform import detect_architecture
from ..sdk.locator import discover, select_version

logger = logging.getLogger(__name__)


def resolve_settings(args) -> WinSDKEnvConfig:
    """
    Merge the configuration file with command-line overrides.

    Args:
        args: Parsed arguments (config, sdk_version, version_policy, arch, shell)

    Returns:
        Effective configuration

    Raises:
        ConfigError: If the configuration file is missing or invalid
    """
    settings = load_config(getattr(args, "config", None))

    for name in ("sdk_version", "version_policy", "arch", "shell"):
        value = getattr(args, name, None)
        if value is not None:
            setattr(settings, name, value)

    if settings.arch == "host":
        settings.arch = detect_architecture()
        logger.debug(f"Using host architecture: {settings.arch}")

    return settings


def select_sdk(args) -> Tuple[str, str]:
    """
    Run a fresh discovery pass and pick the SDK version to use.

    Args:
        args: Parsed arguments with store_factory and settings

    Returns:
        (installation root, selected version)

    Raises:
        SDKNotFoundError: If no SDK or no matching version is installed
        StoreReadError: If the configuration store cannot be queried
    """
    settings = args.settings
    store = args.store_factory()

    installation = discover(store)
    version = select_version(
        list(installation.versions),
        policy=settings.version_policy,
        requested=settings.sdk_version,
    )
    return installation.root, version
