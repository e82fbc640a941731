"""Depth-first directory traversal with configurable exclusion rules.

This package enumerates the entries below a root directory one at a time, without
building an in-memory tree.
"""

from .file_entry import FileEntry
from .walker import walk

__all__ = ["FileEntry", "walk"]
