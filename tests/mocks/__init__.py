"""
Mock implementations for testing winsdkenv components.

This package provides mock implementations of external dependencies and
system interactions to enable isolated, deterministic testing.
"""

from .store import FakeStore, make_sdk_store

__all__ = [
    "FakeStore",
    "make_sdk_store",
]
