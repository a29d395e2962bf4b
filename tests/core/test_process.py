"""
Tests for winsdkenv.core.process module.
"""

from unittest.mock import MagicMock, patch

import pytest

from winsdkenv.core.exceptions import EnvironmentVariableError, LaunchError
from winsdkenv.core.process import ProcessEnvironment


class TestEnvironmentVariables:
    """Test reading and writing variables."""

    def test_get(self):
        """Test reading a set variable."""
        process = ProcessEnvironment({"SDKROOT": "C:\\Library\\Developer\\Platforms"})

        assert process.get("SDKROOT") == "C:\\Library\\Developer\\Platforms"

    def test_get_unset(self):
        """Test reading an unset variable raises."""
        with pytest.raises(EnvironmentVariableError) as exc_info:
            ProcessEnvironment({}).get("SDKROOT")

        assert exc_info.value.name == "SDKROOT"
        assert "SDKROOT" in str(exc_info.value)

    def test_get_empty(self):
        """Test an empty value is treated as unset."""
        with pytest.raises(EnvironmentVariableError):
            ProcessEnvironment({"SDKROOT": ""}).get("SDKROOT")

    def test_set(self):
        """Test writing a variable."""
        environ = {}

        ProcessEnvironment(environ).set("INCLUDE", "a;b")

        assert environ == {"INCLUDE": "a;b"}

    def test_set_rejected(self):
        """Test OS rejection is reported as EnvironmentVariableError."""
        environ = MagicMock()
        environ.__setitem__.side_effect = ValueError("embedded null byte")

        with pytest.raises(EnvironmentVariableError, match="embedded null byte"):
            ProcessEnvironment(environ).set("LIB", "bad\0value")

    def test_defaults_to_os_environ(self):
        """Test the process environment is used by default."""
        import os

        assert ProcessEnvironment().environ is os.environ


class TestDefaultShell:
    """Test shell selection."""

    def test_windows_comspec(self):
        """Test COMSPEC is used on Windows."""
        process = ProcessEnvironment({"COMSPEC": "C:\\Windows\\system32\\cmd.exe"})

        with patch("winsdkenv.core.process.is_windows", return_value=True):
            assert process.default_shell() == "C:\\Windows\\system32\\cmd.exe"

    def test_windows_fallback(self):
        """Test cmd.exe is used when COMSPEC is unset."""
        with patch("winsdkenv.core.process.is_windows", return_value=True):
            assert ProcessEnvironment({}).default_shell() == "cmd.exe"

    def test_posix_shell(self):
        """Test SHELL is used elsewhere."""
        process = ProcessEnvironment({"SHELL": "/bin/zsh"})

        with patch("winsdkenv.core.process.is_windows", return_value=False):
            assert process.default_shell() == "/bin/zsh"

    def test_posix_fallback(self):
        """Test /bin/sh is used when SHELL is unset."""
        with patch("winsdkenv.core.process.is_windows", return_value=False):
            assert ProcessEnvironment({}).default_shell() == "/bin/sh"


class TestExecShell:
    """Test launching the interactive shell."""

    def test_posix_replaces_process(self):
        """Test exec is used on POSIX with the process environment."""
        process = ProcessEnvironment({"INCLUDE": "a", "SHELL": "/bin/bash"})

        with patch("winsdkenv.core.process.is_windows", return_value=False), patch(
            "winsdkenv.core.process.os.execvpe"
        ) as mock_exec:
            process.exec_shell()

        mock_exec.assert_called_once_with(
            "/bin/bash", ["/bin/bash"], {"INCLUDE": "a", "SHELL": "/bin/bash"}
        )

    def test_explicit_shell(self):
        """Test an explicit shell overrides the default."""
        process = ProcessEnvironment({"SHELL": "/bin/bash"})

        with patch("winsdkenv.core.process.is_windows", return_value=False), patch(
            "winsdkenv.core.process.os.execvpe"
        ) as mock_exec:
            process.exec_shell("/usr/bin/fish")

        assert mock_exec.call_args[0][0] == "/usr/bin/fish"

    def test_windows_propagates_exit_code(self):
        """Test Windows waits for the shell and exits with its code."""
        process = ProcessEnvironment({"COMSPEC": "cmd.exe", "LIB": "x"})

        with patch("winsdkenv.core.process.is_windows", return_value=True), patch(
            "winsdkenv.core.process.subprocess.call", return_value=7
        ) as mock_call:
            with pytest.raises(SystemExit) as exc_info:
                process.exec_shell()

        assert exc_info.value.code == 7
        mock_call.assert_called_once_with(["cmd.exe"], env={"COMSPEC": "cmd.exe", "LIB": "x"})

    def test_launch_failure(self):
        """Test a shell that cannot start raises LaunchError."""
        process = ProcessEnvironment({})

        with patch("winsdkenv.core.process.is_windows", return_value=False), patch(
            "winsdkenv.core.process.os.execvpe",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        ):
            with pytest.raises(LaunchError) as exc_info:
                process.exec_shell("/no/such/shell")

        assert "/no/such/shell" in str(exc_info.value)
        assert "No such file or directory" in str(exc_info.value)

    def test_windows_launch_failure(self):
        """Test spawn failure on Windows raises LaunchError."""
        with patch("winsdkenv.core.process.is_windows", return_value=True), patch(
            "winsdkenv.core.process.subprocess.call",
            side_effect=FileNotFoundError(2, "The system cannot find the file specified"),
        ):
            with pytest.raises(LaunchError):
                ProcessEnvironment({}).exec_shell("missing.exe")
