"""Classic hex dump payload encoding."""

from typing import List

from aggregate_to_txt.locale_strings import LocaleStrings

from .base_encoder import PayloadEncoder


class HexDumpPayloadEncoder(PayloadEncoder):
    """Payload encoder that renders bytes as a classic hex dump.

    Each row covers ``row_size`` bytes and has three columns: the offset of the row's
    first byte (at least four uppercase hex digits), each byte as two uppercase hex
    digits followed by a space, and the row rendered as ASCII between bars. Printable
    ASCII (32 to 126) is shown as is and every other byte as ``.``. The final short row
    is padded with spaces so that both bars line up with the rows above.

    Example:
        >>> HexDumpPayloadEncoder().encode_lines(b"Hi\\x00", "blob.dat")
        ['0000 48 69 00                                        |Hi.             |']
    """

    DEFAULT_ROW_SIZE = 16

    def __init__(self, row_size: int = DEFAULT_ROW_SIZE) -> None:
        if row_size < 1:
            raise ValueError(f"row_size must be positive, got {row_size}")
        self.row_size = row_size

    def intro_label(self, strings: LocaleStrings) -> str:
        return strings.dump_starts

    def encode_lines(self, data: bytes, path: str) -> List[str]:
        size = self.row_size
        return [
            self.format_row(offset, data[offset : offset + size])  # noqa: E203
            for offset in range(0, len(data), size)
        ]

    def format_row(self, offset: int, row: bytes) -> str:
        """Format one dump row starting at ``offset``."""
        padding = self.row_size - len(row)
        hex_part = "".join(f"{byte:02X} " for byte in row) + "   " * padding
        ascii_part = "".join(chr(byte) if 32 <= byte < 127 else "." for byte in row) + " " * padding
        return f"{offset:04X} {hex_part}|{ascii_part}|"
