"""Run-scoped diagnostic state.

A Session collects what the end-of-run report needs: extensions that content sniffing
found to be binary, and files that could not be read. It is created once per run and
passed explicitly to whatever needs to record into it.
"""

import sys
import traceback
from dataclasses import dataclass
from typing import List, Optional, Set, TextIO


@dataclass(frozen=True)
class FileFailure:
    """A file or directory that could not be processed.

    Attributes:
        path: Path of the entry as shown in the output.
        error: The error that was raised.
    """

    path: str
    error: BaseException


class Session:
    """Diagnostic accumulator for a single aggregation run.

    Warnings are written to the diagnostics stream (stderr by default) and never to the
    archive output.

    Attributes:
        unknown_binary_extensions (Set[str]): Extensions outside the text allowlist whose
            files were sniffed as binary. Written by the classifier, read by the report.
        failures (List[FileFailure]): Entries skipped because they could not be read.

    Example:
        >>> import io
        >>> session = Session(diagnostics=io.StringIO())
        >>> session.summary_lines()
        ['No unknown/binary files found']
        >>> session.unknown_binary_extensions.update({"png", "dat"})
        >>> session.summary_lines()
        ['Following unknown extensions are treated as binary:', '.dat, .png']
    """

    def __init__(self, diagnostics: Optional[TextIO] = None) -> None:
        self.unknown_binary_extensions: Set[str] = set()
        self.failures: List[FileFailure] = []
        self._diagnostics = diagnostics

    @property
    def diagnostics(self) -> TextIO:
        """Stream receiving warnings, resolved at use time so redirection is honoured."""
        return self._diagnostics if self._diagnostics is not None else sys.stderr

    def record_failure(self, path: str, error: BaseException) -> None:
        """Record an unreadable entry and write a warning with its traceback."""
        self.failures.append(FileFailure(path, error))
        print(f"Warning: cannot read {path}: {error}", file=self.diagnostics)
        traceback.print_exception(type(error), error, error.__traceback__, file=self.diagnostics)

    def record_fallback(self, path: str, error: BaseException) -> None:
        """Write a warning about a text file that is being re-encoded as binary."""
        print(f"Warning: {error}; encoding {path} as binary", file=self.diagnostics)

    def summary_lines(self) -> List[str]:
        """Get the end-of-run report on unknown extensions treated as binary."""
        if not self.unknown_binary_extensions:
            return ["No unknown/binary files found"]
        return [
            "Following unknown extensions are treated as binary:",
            ", ".join(f".{extension}" for extension in sorted(self.unknown_binary_extensions)),
        ]
