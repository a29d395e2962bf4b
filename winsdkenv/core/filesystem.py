"""
File system utilities for winsdkenv.

Provides the copy engine used to deploy files into an SDK installation:
each (source, destination) pair is copied over any existing destination and
reported through an optional progress callback.
"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple, Union

from .exceptions import CopyError
from .platform import format_os_error

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
ProgressCallback = Callable[[Path, Path], None]


def copy_files(
    tasks: Iterable[Tuple[PathLike, PathLike]],
    progress_callback: Optional[ProgressCallback] = None,
) -> int:
    """
    Copy files, overwriting destinations that already exist.

    The destination's parent directory must already exist; it is never
    created. The callback runs inline, once per file actually copied.

    Args:
        tasks: (source, destination) pairs
        progress_callback: Optional callback called with (source, destination)
            after each successful copy

    Returns:
        Number of files copied

    Raises:
        CopyError: If a destination directory is missing or the copy fails

    Example:
        >>> copy_files([("a.txt", "out/a.txt")], lambda s, d: print(f"{s} -> {d}"))
    """
    copied = 0
    for source, destination in tasks:
        source = Path(source)
        destination = Path(destination)

        if not destination.parent.is_dir():
            raise CopyError(
                f"Destination directory does not exist: {destination.parent}"
            )

        try:
            shutil.copy2(source, destination)
        except OSError as e:
            raise CopyError(
                format_os_error(e, f"Failed to copy '{source}' to '{destination}'")
            )

        copied += 1
        logger.debug(f"Copied {source} -> {destination}")

        if progress_callback:
            progress_callback(source, destination)

    return copied
