"""
Process environment host.

Wraps reading and writing process environment variables and replacing the
current process with an interactive shell that inherits them.
"""

import logging
import os
import subprocess
from typing import MutableMapping, NoReturn, Optional

from .exceptions import EnvironmentVariableError, LaunchError
from .platform import format_os_error, is_windows

logger = logging.getLogger(__name__)


class ProcessEnvironment:
    """
    Access to the environment of the running process.

    Attributes:
        environ: Mapping the variables are read from and written to
            (defaults to ``os.environ``)
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get(self, name: str) -> str:
        """
        Read a variable.

        Raises:
            EnvironmentVariableError: If the variable is unset or empty
        """
        value = self.environ.get(name)
        if not value:
            raise EnvironmentVariableError(
                name, f"Environment variable {name} is not set"
            )
        return value

    def set(self, name: str, value: str) -> None:
        """
        Write a variable.

        Raises:
            EnvironmentVariableError: If the OS rejects the value
        """
        try:
            self.environ[name] = value
        except (OSError, ValueError) as e:
            raise EnvironmentVariableError(
                name, f"Failed to set environment variable {name}: {e}"
            )
        logger.debug(f"Set {name}={value}")

    def default_shell(self) -> str:
        """Interactive shell for this platform (COMSPEC on Windows, SHELL elsewhere)."""
        if is_windows():
            return self.environ.get("COMSPEC") or "cmd.exe"
        return self.environ.get("SHELL") or "/bin/sh"

    def exec_shell(self, shell: Optional[str] = None) -> NoReturn:
        """
        Replace the current process with an interactive shell.

        On POSIX the process image is replaced with ``execvpe``. Windows has
        no true exec, so the shell runs as a child and this process exits
        with the shell's return code once it finishes.

        Args:
            shell: Shell executable (defaults to ``default_shell()``)

        Raises:
            LaunchError: If the shell cannot be started
        """
        shell = shell or self.default_shell()
        env = dict(self.environ)
        logger.debug(f"Launching shell: {shell}")

        try:
            if is_windows():
                raise SystemExit(subprocess.call([shell], env=env))
            os.execvpe(shell, [shell], env)
        except OSError as e:
            raise LaunchError(format_os_error(e, f"Failed to launch shell '{shell}'"))
