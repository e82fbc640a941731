"""Safe output writing utilities for the aggregate_to_txt CLI.

This module provides a writing interface that stops cleanly when the reader of the
output goes away or the user interrupts the run.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from aggregate_to_txt.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for the archive stream.

    Text is written as UTF-8 directly to a file descriptor, either one handed in (such as
    stdout) or one opened for an output path. Undecodable characters that came from file
    names are written back as their original bytes.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        bytes_written: Total number of bytes written so far.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to open for writing.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self.bytes_written = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write text, checking for received signals first.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8", errors="surrogateescape")
        view = memoryview(payload)
        try:
            # os.write may write fewer bytes than requested on pipes
            while view:
                written = os.write(self.fd, view)
                self.bytes_written += written
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if it was opened by this writer.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
