"""Tools for chunk-based binary file reading operations."""

from typing import BinaryIO, Iterator


class ChunkedByteReader:
    """Iterator-based chunked reader for files opened in binary mode.

    This class reads a binary file object in fixed-size chunks so that callers can scan
    arbitrarily large files without holding them in memory. Unlike text readers it never
    adjusts chunk boundaries: every chunk except possibly the last is exactly
    ``chunk_size`` bytes long.

    Args:
        file_obj: An opened binary file object to read from.
        chunk_size: Size of chunks to read in bytes. Must be at least 4096 bytes.
            Defaults to 65536 (64 KB).

    Raises:
        ValueError: If chunk_size is less than 4096 bytes.

    Example:
        >>> import io
        >>> reader = ChunkedByteReader(io.BytesIO(b"x" * 5000), chunk_size=4096)
        >>> [len(chunk) for chunk in reader]
        [4096, 904]
    """

    MINIMUM_CHUNK_SIZE = 4096  # 4 KB

    def __init__(self, file_obj: BinaryIO, chunk_size: int = 65536) -> None:
        """Initialize the chunked reader with a file object and chunk size."""

        if chunk_size < self.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {self.MINIMUM_CHUNK_SIZE} bytes, " f"got {chunk_size}")

        self._file: BinaryIO = file_obj
        self._chunk_size: int = chunk_size
        self._position: int = 0

    @property
    def position(self) -> int:
        """Number of bytes handed out so far."""
        return self._position

    def __iter__(self) -> Iterator[bytes]:
        """Return self as iterator."""
        return self

    def __next__(self) -> bytes:
        """Get the next chunk of content.

        Returns:
            The next chunk of bytes from the file.

        Raises:
            StopIteration: When the end of the file is reached.
        """
        chunk: bytes = self._file.read(self._chunk_size)
        if not chunk:
            raise StopIteration
        self._position += len(chunk)
        return chunk
