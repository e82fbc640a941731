"""Payload encoder base class defining the interface for archive block bodies.

This module provides the abstract base class that defines how a file's raw bytes are
turned into the body lines of an archive block. Each concrete encoder also names the
intro label announcing its body, so the label and the representation always match.
"""

from abc import ABC, abstractmethod
from typing import List

from aggregate_to_txt.locale_strings import LocaleStrings


class PayloadEncoder(ABC):
    """Abstract base class defining the interface for payload encoding strategies.

    This class implements the Strategy pattern for representing file content inside an
    archive block in different ways (verbatim text, hex dump, base64). The encoder only
    produces body lines; headers, the intro line and the end-of-file marker are written
    by the archive block itself.

    Body lines never contain a line feed, so a reader can rely on the intro line count
    to find the end of the body.

    Example:
        >>> class UpperEncoder(PayloadEncoder):
        ...     def intro_label(self, strings: LocaleStrings) -> str:
        ...         return strings.text_file_starts
        ...
        ...     def encode_lines(self, data: bytes, path: str) -> List[str]:
        ...         return data.decode("ascii").upper().splitlines()
        >>> UpperEncoder().encode_lines(b"a\\nb", "x.txt")
        ['A', 'B']
    """

    @abstractmethod
    def intro_label(self, strings: LocaleStrings) -> str:
        """Get the label printed before the body line count.

        Args:
            strings: The label table selected for the run.

        Returns:
            The locale-specific intro label for this encoding.
        """
        pass

    @abstractmethod
    def encode_lines(self, data: bytes, path: str) -> List[str]:
        """Encode a file's raw bytes into body lines.

        Args:
            data: The complete file content.
            path: Path of the file, used in error messages.

        Returns:
            The body lines, without line terminators.
        """
        pass
