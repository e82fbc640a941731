"""Recursive directory enumeration.

The walker yields entries depth-first in pre-order: a directory is yielded before its
contents. Entries of one directory are yielded in name order, so two runs over the same
tree produce the same sequence.
"""

import os
from pathlib import Path
from typing import Callable, Iterator, Optional

from aggregate_to_txt.exceptions import RootNotFoundError, SpecialFileError
from aggregate_to_txt.exclusion_rules.base_rules import BaseExclusionRules
from aggregate_to_txt.traversal.file_entry import FileEntry
from aggregate_to_txt.types import PathType

ErrorCallback = Callable[[str, OSError], None]


def check_root(root_path: PathType) -> Path:
    """Validate the root directory of a run.

    Args:
        root_path: The directory to aggregate.

    Returns:
        The root as a Path.

    Raises:
        RootNotFoundError: If the root does not exist or is not a directory.
    """
    root = Path(root_path)
    if not root.exists():
        raise RootNotFoundError(str(root_path))
    if not root.is_dir():
        raise RootNotFoundError(str(root_path), "is not a directory")
    return root


def walk(
    root_path: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[FileEntry]:
    """Enumerate every file and directory below a root directory.

    Symbolic links to directories are reported as directories but never descended into,
    which rules out symlink loops. Entries that are neither directories nor regular files
    (FIFOs, sockets, devices, dangling links) are never yielded; they are passed to
    on_error as a SpecialFileError. Excluded directories are pruned along with their
    contents. The root itself is not yielded.

    Args:
        root_path: The directory to enumerate.
        exclusion_rules: Optional rules filtering entries by their relative path.
            Directories are also checked with a trailing slash so that patterns such as
            ``build/`` match them.
        on_error: Called with the path and the error when a subdirectory cannot be listed
            or an entry is not a regular file; the entry is then skipped. If None, listing
            errors propagate and special files are skipped silently.

    Yields:
        FileEntry objects in depth-first pre-order.

    Raises:
        RootNotFoundError: If the root does not exist or is not a directory.
        OSError: If a directory cannot be listed and no on_error callback is given.

    Example:
        >>> for entry in walk("project"):  # doctest: +SKIP
        ...     print("D" if entry.is_directory else "F", entry.path)
        F project/readme
        D project/src
        F project/src/main.c
    """
    root = check_root(root_path)
    return _walk_directory(root, "", exclusion_rules, on_error)


def _walk_directory(
    directory: Path,
    relative_dir: str,
    exclusion_rules: Optional[BaseExclusionRules],
    on_error: Optional[ErrorCallback],
) -> Iterator[FileEntry]:
    try:
        with os.scandir(directory) as iterator:
            dir_entries = sorted(iterator, key=lambda dir_entry: dir_entry.name)
    except OSError as e:
        if on_error is None or not relative_dir:
            raise
        on_error(str(directory), e)
        return

    for dir_entry in dir_entries:
        relative_path = f"{relative_dir}/{dir_entry.name}" if relative_dir else dir_entry.name
        try:
            is_directory = dir_entry.is_dir()
            is_file = not is_directory and dir_entry.is_file()
        except OSError:
            is_directory = is_file = False

        if exclusion_rules is not None:
            if exclusion_rules.exclude(relative_path):
                continue
            if is_directory and exclusion_rules.exclude(relative_path + "/"):
                continue

        entry_path = directory / dir_entry.name
        if not is_directory and not is_file:
            # Opening a FIFO or device would block or read forever
            if on_error is not None:
                on_error(str(entry_path), SpecialFileError(str(entry_path)))
            continue

        yield FileEntry(entry_path, relative_path, is_directory)

        if is_directory and not dir_entry.is_symlink():
            yield from _walk_directory(entry_path, relative_path, exclusion_rules, on_error)
