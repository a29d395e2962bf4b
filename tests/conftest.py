"""
Pytest configuration and shared fixtures for winsdkenv tests.
"""

import logging
from pathlib import Path

import pytest

from tests.mocks import make_sdk_store


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "windows: marks tests that need the real Windows registry"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def sdk_store():
    """Store with root C:\\SDK and two versions, enumerated unsorted."""
    return make_sdk_store("C:\\SDK", ["10.0.1", "10.0.2"])


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory (no winsdkenv.yaml)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sdk_tree(tmp_path: Path):
    """
    Create a toolchain root and an SDK installation on disk.

    Returns:
        Tuple of (toolchain_root, sdk_root, version). The module map sources
        are NOT created; the SDK's ucrt and um include directories are.
    """
    toolchain_root = tmp_path / "toolchain"
    (toolchain_root / "usr" / "share").mkdir(parents=True)

    sdk_root = tmp_path / "Windows Kits" / "10"
    version = "10.0.22621.0"
    for leaf in ("ucrt", "um"):
        (sdk_root / "Include" / version / leaf).mkdir(parents=True)

    return toolchain_root, sdk_root, version
