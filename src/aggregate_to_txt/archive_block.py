"""Archive block representation.

An archive block is the self-contained textual unit describing one file. Its layout is:

    --- <Text file|Binary file>: <path>
    --- <Last modified>: <timestamp>          (omitted when unavailable)
    --- SHA256: <64 lowercase hex chars>
    --- <intro label> <N> ---
    <N body lines>
    --- <end of file> ---
    <empty separator line>

Labels come from the run's LocaleStrings; everything else is locale independent.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from aggregate_to_txt.classifier.classification import Classification
from aggregate_to_txt.locale_strings import ENGLISH, LocaleStrings

MARKER = "---"


@dataclass(frozen=True)
class ArchiveBlock:
    """One file rendered as header, counted body and footer.

    The body line count is derived from the stored lines, so the intro line can never
    disagree with the number of lines that follow it.

    Attributes:
        classification: Whether the body is verbatim text or an encoded binary payload.
        path: Path of the file as shown in the header.
        sha256: Lowercase hex SHA-256 of the raw file bytes.
        intro_label: Label printed before the body line count.
        lines: Body lines, without line terminators.
        last_modified: Formatted modification time, or None to omit the header line.
        strings: Label table used for the header and footer.

    Example:
        >>> block = ArchiveBlock(Classification.TEXT, "notes.txt", "ab" * 32,
        ...                      "file contents, total lines:", ("hello", "world"))
        >>> print(block.render(), end="")
        --- Text file: notes.txt
        --- SHA256: abababababababababababababababababababababababababababababababab
        --- file contents, total lines: 2 ---
        hello
        world
        --- end of file ---
        <BLANKLINE>
    """

    classification: Classification
    path: str
    sha256: str
    intro_label: str
    lines: Tuple[str, ...]
    last_modified: Optional[str] = None
    strings: LocaleStrings = ENGLISH

    @property
    def line_count(self) -> int:
        """Number of body lines announced by the intro line."""
        return len(self.lines)

    def header_lines(self) -> List[str]:
        """Get the header lines (kind and path, optional timestamp, hash)."""
        if self.classification is Classification.BINARY:
            kind = self.strings.binary_file
        else:
            kind = self.strings.text_file

        header = [f"{MARKER} {kind}: {self.path}"]
        if self.last_modified is not None:
            header.append(f"{MARKER} {self.strings.file_time}: {self.last_modified}")
        header.append(f"{MARKER} SHA256: {self.sha256}")
        return header

    def intro_line(self) -> str:
        return f"{MARKER} {self.intro_label} {self.line_count} {MARKER}"

    def footer_line(self) -> str:
        return f"{MARKER} {self.strings.end_file} {MARKER}"

    def iter_lines(self) -> Iterator[str]:
        """Yield every line of the block, without line terminators.

        The last line yielded is the empty separator that follows the footer.
        """
        yield from self.header_lines()
        yield self.intro_line()
        yield from self.lines
        yield self.footer_line()
        yield ""

    def render(self) -> str:
        """Render the complete block as text, each line terminated by a line feed."""
        return "".join(line + "\n" for line in self.iter_lines())
