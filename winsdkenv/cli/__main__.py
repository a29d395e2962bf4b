"""
Entry point for running winsdkenv CLI as a module.

Usage: python -m winsdkenv.cli [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
