"""Verbatim text payload encoding."""

from typing import List

from aggregate_to_txt.exceptions import TextDecodeError
from aggregate_to_txt.locale_strings import LocaleStrings

from .base_encoder import PayloadEncoder


class TextPayloadEncoder(PayloadEncoder):
    """Payload encoder that writes UTF-8 text line by line, unchanged.

    Content is split on line feeds only. A final line feed terminates the last line
    rather than starting an empty one, so ``"hello\\nworld\\n"`` has two lines and
    empty content has none. Content with and without a final line feed therefore has the
    same body, so a restorer must use the SHA-256 header to decide whether the last line
    ends with one. Carriage returns are kept as part of their line.

    Example:
        >>> TextPayloadEncoder().encode_lines(b"hello\\nworld\\n", "notes.txt")
        ['hello', 'world']
        >>> TextPayloadEncoder().encode_lines(b"", "empty.txt")
        []
    """

    def intro_label(self, strings: LocaleStrings) -> str:
        return strings.text_file_starts

    def encode_lines(self, data: bytes, path: str) -> List[str]:
        """Decode the content as UTF-8 and split it into lines.

        Raises:
            TextDecodeError: If the content is not valid UTF-8.
        """
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TextDecodeError(path, e.start) from e

        if not text:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines
