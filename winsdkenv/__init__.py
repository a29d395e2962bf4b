"""
winsdkenv - Windows SDK development environment setup.

Discovers the installed Windows 10 SDK, exposes its INCLUDE/LIB search paths
and deploys module maps into it.
"""

__version__ = "0.1.0"
