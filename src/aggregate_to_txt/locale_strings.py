"""Label tables for archive headers and footers.

Only the human-readable labels change between locales. Markers, counts, hashes and
payload encodings are identical whichever table is selected.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class LocaleStrings:
    """Display strings used when rendering archive blocks.

    Attributes:
        text_file: Header label for text files.
        binary_file: Header label for binary files.
        file_time: Label of the last-modified header line.
        text_file_starts: Intro label before the line count of a text body.
        dump_starts: Intro label before the line count of a hex dump body.
        base64_starts: Intro label before the line count of a base64 body.
        end_file: Label of the end-of-file marker.
    """

    text_file: str = "Text file"
    binary_file: str = "Binary file"
    file_time: str = "Last modified"
    text_file_starts: str = "file contents, total lines:"
    dump_starts: str = "binary file dump, total lines:"
    base64_starts: str = "base64 encoded contents, total lines:"
    end_file: str = "end of file"


ENGLISH = LocaleStrings()

RUSSIAN = LocaleStrings(
    text_file="Текстовый файл",
    binary_file="Двоичный файл",
    file_time="Время модификации",
    text_file_starts="начало файла, всего строк:",
    dump_starts="Начало файла, всего строк:",
    base64_starts="Начало base64-кодированного файла, всего строк:",
    end_file="конец файла",
)

LOCALES: Dict[str, LocaleStrings] = {
    "en": ENGLISH,
    "ru": RUSSIAN,
}


def get_locale_strings(name: str) -> LocaleStrings:
    """Look up a label table by locale name.

    Args:
        name: Locale name, case-insensitive ("en" or "ru").

    Returns:
        The matching LocaleStrings table.

    Raises:
        ValueError: If the locale is not supported.

    Example:
        >>> get_locale_strings("RU").end_file
        'конец файла'
    """
    try:
        return LOCALES[name.lower()]
    except KeyError:
        raise ValueError(f"Unsupported locale: {name}. Must be one of: {', '.join(sorted(LOCALES))}")
