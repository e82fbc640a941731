from typing import Optional


class RootNotFoundError(FileNotFoundError):
    """
    Exception raised when the root directory to aggregate does not exist or is not a directory.

    This error aborts a run before any archive output is produced. At the CLI level it is
    reported as a single error message with a non-zero exit code.

    Attributes:
        root_path (str): The root path that could not be used.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'Root directory not found: /no/such/dir'
    """

    def __init__(self, root_path: str, reason: str = "not found") -> None:
        """
        Initialize the exception with the offending root path.

        Args:
            root_path (str): The root path that was given.
            reason (str, optional): Short description of the problem. Defaults to "not found".
        """
        self.root_path = root_path
        self.reason = reason
        super().__init__(f"Root directory {reason}: {root_path}")


class TextDecodeError(ValueError):
    """
    Exception raised when a file classified as text is not valid UTF-8.

    The classifier only looks for control bytes, so invalid UTF-8 sequences can slip past it.
    The aggregator catches this exception and encodes the same file as binary instead.

    Attributes:
        file_path (str): Path to the file that failed to decode.
        offset (Optional[int]): Byte offset of the first undecodable byte, if known.

    Example:
        >>> error = TextDecodeError("notes.txt", 7)
        >>> str(error)
        'File is not valid UTF-8 text: notes.txt (at byte 7)'
    """

    def __init__(self, file_path: str, offset: Optional[int] = None) -> None:
        """
        Initialize the exception with the path to the undecodable file.

        Args:
            file_path (str): Path to the file that failed to decode.
            offset (Optional[int]): Byte offset of the first undecodable byte.
        """
        self.file_path = file_path
        self.offset = offset
        message = f"File is not valid UTF-8 text: {file_path}"
        if offset is not None:
            message += f" (at byte {offset})"
        super().__init__(message)


class SpecialFileError(OSError):
    """
    Exception raised for an entry that is neither a directory nor a regular file.

    FIFOs, sockets, device nodes and dangling symbolic links cannot be archived; opening
    some of them would block forever. Traversal reports them with this error and skips them.

    Attributes:
        file_path (str): Path to the entry.

    Example:
        >>> str(SpecialFileError("root/pipe"))
        'Not a regular file: root/pipe'
    """

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Not a regular file: {file_path}")
