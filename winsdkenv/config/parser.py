"""YAML configuration parser for winsdkenv.

This module provides parsing and validation for winsdkenv.yaml configuration files.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from ..core.exceptions import ConfigError
from ..core.platform import SUPPORTED_ARCHITECTURES
from ..sdk.locator import VERSION_POLICIES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "winsdkenv.yaml"

# "host" is resolved to the detected architecture after CLI overrides merge
ARCH_CHOICES = SUPPORTED_ARCHITECTURES + ("host",)


@dataclass
class WinSDKEnvConfig:
    """Complete winsdkenv configuration."""

    version: int = 1
    arch: str = "x64"
    version_policy: str = "first"  # 'first', 'latest'
    sdk_version: Optional[str] = None  # explicit version label
    shell: Optional[str] = None  # shell launched by --setenv
    toolchain_root: Optional[str] = None  # overrides SDKROOT


def parse_config(config_path: Path) -> WinSDKEnvConfig:
    """
    Parse winsdkenv.yaml configuration file.

    Args:
        config_path: Path to winsdkenv.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return WinSDKEnvConfig()

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def load_config(
    config_path: Optional[Path] = None, search_dir: Optional[Path] = None
) -> WinSDKEnvConfig:
    """
    Load configuration from an explicit path or the default location.

    An explicit path must exist. Without one, ``winsdkenv.yaml`` in
    ``search_dir`` (default: current directory) is used if present, otherwise
    defaults apply.

    Raises:
        ConfigError: If the explicit file is missing or any file is invalid
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    default_config = (search_dir or Path.cwd()) / DEFAULT_CONFIG_NAME
    if default_config.exists():
        logger.debug(f"Loading configuration from {default_config}")
        return parse_config(default_config)

    logger.debug("No config file found, using defaults")
    return WinSDKEnvConfig()


def _parse_and_validate(data: dict) -> WinSDKEnvConfig:
    """Parse and validate configuration data."""
    version = data.get("version", 1)
    if version != 1:
        raise ConfigError(f"Unsupported version: {version} (expected 1)")

    arch = data.get("arch", "x64")
    if arch not in ARCH_CHOICES:
        raise ConfigError(
            f"Invalid architecture: {arch} (expected one of {list(ARCH_CHOICES)})"
        )

    version_policy = data.get("version_policy", "first")
    if version_policy not in VERSION_POLICIES:
        raise ConfigError(
            f"Invalid version_policy: {version_policy} "
            f"(expected one of {list(VERSION_POLICIES)})"
        )

    config = WinSDKEnvConfig(version=version, arch=arch, version_policy=version_policy)
    for name in ("sdk_version", "shell", "toolchain_root"):
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"{name} must be a string")
        setattr(config, name, value)

    unknown = set(data) - {
        "version",
        "arch",
        "version_policy",
        "sdk_version",
        "shell",
        "toolchain_root",
    }
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

    return config
