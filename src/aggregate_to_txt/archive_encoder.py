"""Archive encoder turning one file into an ArchiveBlock.

This module reads a file completely, hashes its raw bytes and hands them to the payload
encoder matching the file's classification and the run configuration.
"""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

from .archive_block import ArchiveBlock
from .classifier.classification import Classification
from .config import Configuration
from .encoders.base64_encoder import Base64PayloadEncoder
from .encoders.base_encoder import PayloadEncoder
from .encoders.hex_dump_encoder import HexDumpPayloadEncoder
from .encoders.text_encoder import TextPayloadEncoder
from .hasher import sha256_hex
from .types import PathType


def format_timestamp(mtime: float) -> str:
    """Format a POSIX modification time as UTC ISO 8601 with milliseconds.

    Example:
        >>> format_timestamp(0)
        '1970-01-01T00:00:00.000Z'
    """
    moment = datetime.fromtimestamp(mtime, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ArchiveEncoder:
    """Encodes files into archive blocks according to a run configuration.

    Binary payloads use a hex dump unless the configuration asks for base64. Text
    payloads are written verbatim and must be valid UTF-8.

    Attributes:
        configuration (Configuration): The run configuration.

    Example:
        >>> from aggregate_to_txt.config import Configuration
        >>> encoder = ArchiveEncoder(Configuration(Path("src")))  # doctest: +SKIP
        >>> block = encoder.encode("src/notes.txt", Classification.TEXT)  # doctest: +SKIP
        >>> block.line_count  # doctest: +SKIP
        2
    """

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self._text_encoder: PayloadEncoder = TextPayloadEncoder()
        self._binary_encoder: PayloadEncoder
        if configuration.use_base64:
            self._binary_encoder = Base64PayloadEncoder()
        else:
            self._binary_encoder = HexDumpPayloadEncoder()

    def payload_encoder(self, classification: Classification) -> PayloadEncoder:
        """Get the payload encoder used for a classification."""
        if classification is Classification.TEXT:
            return self._text_encoder
        return self._binary_encoder

    def encode(self, file_path: PathType, classification: Classification) -> ArchiveBlock:
        """Read a file and build its archive block.

        The file is opened, read completely and closed before any encoding happens.

        Args:
            file_path: Path to the file. Its string form is shown in the header.
            classification: How the payload is to be represented.

        Returns:
            The complete archive block for the file.

        Raises:
            OSError: If the file cannot be read.
            TextDecodeError: If classification is TEXT and the content is not valid UTF-8.
        """
        path_str = str(file_path)
        data, last_modified = self._read(Path(file_path))

        payload_encoder = self.payload_encoder(classification)
        lines = payload_encoder.encode_lines(data, path_str)

        return ArchiveBlock(
            classification=classification,
            path=path_str,
            sha256=sha256_hex(data),
            intro_label=payload_encoder.intro_label(self.configuration.strings),
            lines=tuple(lines),
            last_modified=last_modified,
            strings=self.configuration.strings,
        )

    @staticmethod
    def _read(path: Path) -> Tuple[bytes, Optional[str]]:
        with open(path, "rb") as file:
            data = file.read()
            try:
                last_modified: Optional[str] = format_timestamp(os.fstat(file.fileno()).st_mtime)
            except (OSError, OverflowError, ValueError):
                last_modified = None
        return data, last_modified


def encode(file_path: PathType, classification: Classification, configuration: Configuration) -> ArchiveBlock:
    """Encode a single file with a one-off ArchiveEncoder.

    Example:
        >>> block = encode("notes.txt", Classification.TEXT, Configuration(Path(".")))  # doctest: +SKIP
        >>> print(block.render())  # doctest: +SKIP
    """
    return ArchiveEncoder(configuration).encode(file_path, classification)
