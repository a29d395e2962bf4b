"""
Entry point for running winsdkenv as a module.

Usage: python -m winsdkenv [--setenv | --env | --deploy | --list-sdks] [options]
"""

from winsdkenv.cli.parser import main

if __name__ == "__main__":
    main()
