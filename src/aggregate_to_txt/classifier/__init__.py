"""Text/binary classification of files.

This package decides whether a file is archived verbatim as text or encoded as
binary, using name and extension allowlists first and content sniffing second.
"""

from .classification import Classification, ClassificationResult
from .text_detector import TEXT_EXTENSIONS, TEXT_NAMES, classify, classify_file, find_control_byte, get_extension

__all__ = [
    "Classification",
    "ClassificationResult",
    "TEXT_EXTENSIONS",
    "TEXT_NAMES",
    "classify",
    "classify_file",
    "find_control_byte",
    "get_extension",
]
