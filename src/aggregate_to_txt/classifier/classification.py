"""Classification types for files encountered during directory traversal."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Classification(str, Enum):
    """How a file's payload is represented in the archive.

    Values:
        TEXT: Payload is written verbatim, line by line
        BINARY: Payload is written as a hex dump or base64 text
    """

    TEXT = "text"
    BINARY = "binary"

    @property
    def tag(self) -> str:
        """One-character tag used in dry-run reports ("T" or "B")."""
        return "B" if self is Classification.BINARY else "T"


@dataclass(frozen=True)
class ClassificationResult:
    """A classification together with the evidence behind a binary verdict.

    Attributes:
        classification: The verdict for the file.
        control_byte: ``(offset, byte_value)`` of the first control byte found by content
            sniffing, or None if the verdict did not come from one.

    Example:
        >>> result = ClassificationResult(Classification.BINARY, (0, 0))
        >>> result.evidence_line()
        'Non-ascii character found @0: 0, considering file is binary'
        >>> ClassificationResult(Classification.TEXT).evidence_line() is None
        True
    """

    classification: Classification
    control_byte: Optional[Tuple[int, int]] = None

    def evidence_line(self) -> Optional[str]:
        """Dry-run explanation of a binary verdict, if there is one."""
        if self.control_byte is None:
            return None
        offset, value = self.control_byte
        return f"Non-ascii character found @{offset}: {value}, considering file is binary"
