"""Directory to self-describing text archive utilities.

This package walks a directory tree and writes every file as a human-readable
text block carrying its path, modification time, SHA-256 hash and payload, so
that the resulting stream can be read by a person and used to rebuild the tree.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("aggregate-to-txt")
except PackageNotFoundError:
    __version__ = "unknown"
