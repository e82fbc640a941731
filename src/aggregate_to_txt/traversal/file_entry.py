"""Entry representation for file system elements yielded during traversal."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """A file or directory found below the root directory.

    Entries are transient: each one is processed and dropped before the next is produced.

    Attributes:
        path (Path): Path of the entry, the root path joined with the relative path. Its
            string form is what archive headers and reports show.
        relative_path (str): Path relative to the root, using forward slashes.
        is_directory (bool): True for directories, including symlinks to directories.

    Example:
        >>> entry = FileEntry(Path("root/src/main.c"), "src/main.c", is_directory=False)
        >>> entry.name
        'main.c'
        >>> entry.is_directory
        False
    """

    path: Path
    relative_path: str
    is_directory: bool = False

    @property
    def name(self) -> str:
        """The base name of the entry."""
        return self.path.name
