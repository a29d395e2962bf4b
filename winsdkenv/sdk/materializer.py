"""
winsdkenv/sdk/materializer.py

Turns a discovered SDK into something usable: the INCLUDE/LIB search paths
the compiler reads, an interactive shell with those paths applied, or the
module maps copied into the SDK's include tree.
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import Dict, List, NamedTuple, NoReturn, Optional, TextIO, Tuple

from ..core.filesystem import ProgressCallback, copy_files
from ..core.process import ProcessEnvironment

logger = logging.getLogger(__name__)

INCLUDE_LEAVES = ("ucrt", "shared", "um", "winrt", "cppwinrt")
LIBRARY_LEAVES = ("ucrt", "um")

MODULE_MAP_NAME = "module.modulemap.1"


@dataclass(frozen=True)
class EnvironmentVariableSet:
    """
    Search paths for the compiler and linker.

    Attributes:
        include: Header directories in search order
        lib: Import library directories in search order
    """

    include: Tuple[str, ...]
    lib: Tuple[str, ...]

    def variables(self) -> Dict[str, str]:
        """Environment variables with each path list joined by ';'."""
        return {
            "INCLUDE": ";".join(self.include),
            "LIB": ";".join(self.lib),
        }


class DeploymentTask(NamedTuple):
    """One file to copy into the SDK."""

    source: Path
    destination: Path


@dataclass
class DeploymentResult:
    """Outcome of deploying the module maps."""

    copied: List[DeploymentTask] = field(default_factory=list)
    skipped: List[DeploymentTask] = field(default_factory=list)


def compute_search_paths(
    root: str, version: str, arch: str = "x64"
) -> EnvironmentVariableSet:
    """
    Compute the INCLUDE and LIB directories of an SDK version.

    Paths are joined with Windows semantics on every host. Directories are
    not checked for existence.

    Args:
        root: SDK installation root
        version: SDK version label
        arch: Target architecture of the import libraries

    Returns:
        EnvironmentVariableSet with 5 include and 2 library directories

    Example:
        >>> paths = compute_search_paths("C:\\\\SDK", "10.0.1")
        >>> paths.include[0]
        'C:\\\\SDK\\\\Include\\\\10.0.1\\\\ucrt'
    """
    include_dir = PureWindowsPath(root, "Include", version)
    lib_dir = PureWindowsPath(root, "Lib", version)

    return EnvironmentVariableSet(
        include=tuple(str(include_dir / leaf) for leaf in INCLUDE_LEAVES),
        lib=tuple(str(lib_dir / leaf / arch) for leaf in LIBRARY_LEAVES),
    )


def print_environment(
    env_set: EnvironmentVariableSet, stream: Optional[TextIO] = None
) -> None:
    """Write each variable as a KEY=value line."""
    stream = stream or sys.stdout
    for name, value in env_set.variables().items():
        print(f"{name}={value}", file=stream)


def apply_and_relaunch(
    env_set: EnvironmentVariableSet,
    process: Optional[ProcessEnvironment] = None,
    shell: Optional[str] = None,
) -> NoReturn:
    """
    Apply the variables to this process and replace it with a shell.

    Does not return on success.

    Raises:
        EnvironmentVariableError: If a variable cannot be set
        LaunchError: If the shell cannot be launched
    """
    process = process or ProcessEnvironment()
    for name, value in env_set.variables().items():
        process.set(name, value)

    process.exec_shell(shell)


def build_deployment_tasks(
    toolchain_root: str, root: str, version: str
) -> List[DeploymentTask]:
    """
    Build the (source, destination) pairs for the two module maps.

    Args:
        toolchain_root: Toolchain platform root (SDKROOT)
        root: SDK installation root
        version: SDK version label

    Returns:
        The ucrt and Windows SDK module map tasks
    """
    share_dir = Path(toolchain_root, "usr", "share")
    include_dir = Path(root, "Include", version)

    return [
        DeploymentTask(
            source=share_dir / "ucrt.modulemap",
            destination=include_dir / "ucrt" / MODULE_MAP_NAME,
        ),
        DeploymentTask(
            source=share_dir / "winsdk.modulemap",
            destination=include_dir / "um" / MODULE_MAP_NAME,
        ),
    ]


def deploy_module_maps(
    toolchain_root: str,
    root: str,
    version: str,
    progress_callback: Optional[ProgressCallback] = None,
) -> DeploymentResult:
    """
    Copy the module maps into the SDK include directories.

    A missing source file is logged as a warning and skipped; the remaining
    tasks still run.

    Args:
        toolchain_root: Toolchain platform root (SDKROOT)
        root: SDK installation root
        version: SDK version label
        progress_callback: Optional callback called with (source, destination)
            for each file copied

    Returns:
        DeploymentResult listing copied and skipped tasks

    Raises:
        CopyError: If a destination directory is missing or a copy fails
    """
    result = DeploymentResult()

    def report(source: Path, destination: Path) -> None:
        logger.info(f"Deployed {source} -> {destination}")
        if progress_callback:
            progress_callback(source, destination)

    for task in build_deployment_tasks(toolchain_root, root, version):
        if not task.source.is_file():
            logger.warning(f"Module map not found, skipping: {task.source}")
            result.skipped.append(task)
            continue

        copy_files([task], report)
        result.copied.append(task)

    return result
