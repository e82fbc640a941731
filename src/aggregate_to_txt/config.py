"""Run configuration."""

from dataclasses import dataclass, field
from pathlib import Path

from aggregate_to_txt.locale_strings import ENGLISH, LocaleStrings


@dataclass(frozen=True)
class Configuration:
    """Immutable settings for one aggregation run.

    Attributes:
        root_path: Directory to aggregate.
        dry_run: Report classification only, without archive payloads.
        use_base64: Encode binary payloads as base64 instead of a hex dump.
        strings: Label table used for headers and footers.
    """

    root_path: Path
    dry_run: bool = False
    use_base64: bool = False
    strings: LocaleStrings = field(default=ENGLISH)
