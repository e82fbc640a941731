"""Text file detection utilities."""

import re
from pathlib import Path
from typing import Optional, Set, Tuple

from aggregate_to_txt.classifier.classification import Classification, ClassificationResult
from aggregate_to_txt.io.chunked_byte_reader import ChunkedByteReader
from aggregate_to_txt.types import PathType

# Conventionally-text file names without a meaningful extension (case-sensitive)
TEXT_NAMES = frozenset(
    {
        "readme",
        "Vagrantfile",
        "Makefile",
    }
)

# Known text file extensions, compared against the lowercased text after the last dot
TEXT_EXTENSIONS = frozenset(
    {
        # C and C++
        "c",
        "cc",
        "c++",
        "cpp",
        "cxx",
        "h",
        "hpp",
        "h++",
        "hxx",
        # Documents
        "txt",
        "md",
        # Shell and batch scripts
        "sh",
        "bat",
        "cmd",
        # JVM
        "java",
        "properties",
        "kt",
        "kts",
        # Web
        "js",
        "ts",
        "json",
        "css",
        "html",
        "npmrc",
        # Data/Config
        "sql",
        "yml",
        "yaml",
        "conf",
        "xml",
        "plist",
        # VCS and container metadata
        "dockerignore",
        "gitattribute",
        "gitattributes",
        "gitignore",
    }
)

SHEBANG = b"#!"

SNIFF_CHUNK_SIZE = 65536

# C0 control bytes other than tab, line feed and carriage return
_CONTROL_BYTE = re.compile(rb"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def get_extension(name: str) -> Optional[str]:
    """Return the lowercased extension of a base name, or None if it has no dot.

    The name is split on every dot and the last part is taken, so dotfiles such as
    ``.gitignore`` have the extension ``gitignore``.

    Example:
        >>> get_extension("Main.KT")
        'kt'
        >>> get_extension(".gitignore")
        'gitignore'
        >>> get_extension("Makefile") is None
        True
    """
    parts = name.split(".")
    if len(parts) == 1:
        return None
    return parts[-1].lower()


def find_control_byte(file_path: PathType, chunk_size: int = SNIFF_CHUNK_SIZE) -> Optional[Tuple[int, int]]:
    """Scan a file for binary evidence.

    A file starting with ``#!`` is an interpreter script and is never scanned further.
    Otherwise the whole file is read in chunks and the first C0 control byte that is not
    tab (9), line feed (10) or carriage return (13) is reported. Bytes of 32 and above,
    including every non-ASCII byte, are accepted as text.

    Args:
        file_path: Path to the file to scan. Can be any path-like object.
        chunk_size: Number of bytes read per chunk. Defaults to 64 KiB.

    Returns:
        A (offset, byte_value) pair for the first control byte found, or None if the
        file looks like text.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(file_path, "rb") as file:
        if file.read(len(SHEBANG)) == SHEBANG:
            return None
        file.seek(0)

        reader = ChunkedByteReader(file, chunk_size)
        offset = 0
        for chunk in reader:
            match = _CONTROL_BYTE.search(chunk)
            if match is not None:
                position = match.start()
                return offset + position, chunk[position]
            offset = reader.position

    return None


def classify(
    file_path: PathType,
    unknown_extensions: Optional[Set[str]] = None,
    chunk_size: int = SNIFF_CHUNK_SIZE,
) -> Classification:
    """Classify a file as text or binary.

    Rules are applied in order and the first match wins:

    1. The base name is one of TEXT_NAMES: text.
    2. The base name has no extension: decided by content sniffing.
    3. The extension is one of TEXT_EXTENSIONS: text, whatever the content.
    4. Otherwise: decided by content sniffing.

    Content sniffing (see find_control_byte) treats a ``#!`` prefix as text and any
    stray control byte anywhere in the file as binary.

    Args:
        file_path: Path to the file to classify. Can be any path-like object.
        unknown_extensions: Optional set that receives the extension of every file that
            has an extension outside TEXT_EXTENSIONS and was sniffed as binary. The set is
            only written to; it never influences classification.
        chunk_size: Number of bytes read per chunk while sniffing.

    Returns:
        Classification.TEXT or Classification.BINARY.

    Raises:
        OSError: If content sniffing is needed and the file cannot be read.

    Example:
        >>> classify("src/main.cpp")  # doctest: +SKIP
        <Classification.TEXT: 'text'>
        >>> seen = set()
        >>> classify("assets/logo.png", seen)  # doctest: +SKIP
        <Classification.BINARY: 'binary'>
        >>> seen  # doctest: +SKIP
        {'png'}
    """
    return classify_file(file_path, unknown_extensions, chunk_size).classification


def classify_file(
    file_path: PathType,
    unknown_extensions: Optional[Set[str]] = None,
    chunk_size: int = SNIFF_CHUNK_SIZE,
) -> ClassificationResult:
    """Classify a file like classify() and keep the evidence for a binary verdict.

    Returns:
        A ClassificationResult. Its control_byte is set when content sniffing found a
        control byte, and None otherwise.

    Raises:
        OSError: If content sniffing is needed and the file cannot be read.
    """
    name = Path(file_path).name

    if name in TEXT_NAMES:
        return ClassificationResult(Classification.TEXT)

    extension = get_extension(name)
    if extension is not None and extension in TEXT_EXTENSIONS:
        return ClassificationResult(Classification.TEXT)

    control_byte = find_control_byte(file_path, chunk_size)
    if control_byte is None:
        return ClassificationResult(Classification.TEXT)

    if extension and unknown_extensions is not None:
        unknown_extensions.add(extension)
    return ClassificationResult(Classification.BINARY, control_byte)
