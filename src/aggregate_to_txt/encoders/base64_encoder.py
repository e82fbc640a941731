"""Base64 payload encoding."""

import base64
from typing import List

from aggregate_to_txt.locale_strings import LocaleStrings

from .base_encoder import PayloadEncoder


class Base64PayloadEncoder(PayloadEncoder):
    """Payload encoder that writes base64 text hard-wrapped at a fixed width.

    Joining the body lines and base64-decoding the result gives back the original bytes.

    Attributes:
        line_width (int): Maximum number of characters per body line.

    Example:
        >>> Base64PayloadEncoder(line_width=4).encode_lines(b"hello", "h.bin")
        ['aGVs', 'bG8=']
    """

    DEFAULT_LINE_WIDTH = 80

    def __init__(self, line_width: int = DEFAULT_LINE_WIDTH) -> None:
        if line_width < 1:
            raise ValueError(f"line_width must be positive, got {line_width}")
        self.line_width = line_width

    def intro_label(self, strings: LocaleStrings) -> str:
        return strings.base64_starts

    def encode_lines(self, data: bytes, path: str) -> List[str]:
        encoded = base64.b64encode(data).decode("ascii")
        width = self.line_width
        return [encoded[i : i + width] for i in range(0, len(encoded), width)]  # noqa: E203
