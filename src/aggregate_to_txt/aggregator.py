"""Directory to text archive conversion with streaming support.

This module ties traversal, classification and encoding together. A run walks the
root directory once and yields output text one archive block (or one report line) at a
time, so only a single file is ever held in memory.
"""

from pathlib import Path
from typing import Iterator, Optional

from aggregate_to_txt.archive_block import ArchiveBlock
from aggregate_to_txt.archive_encoder import ArchiveEncoder
from aggregate_to_txt.classifier.classification import Classification, ClassificationResult
from aggregate_to_txt.classifier.text_detector import classify_file
from aggregate_to_txt.config import Configuration
from aggregate_to_txt.exceptions import TextDecodeError
from aggregate_to_txt.exclusion_rules.base_rules import BaseExclusionRules
from aggregate_to_txt.session import Session
from aggregate_to_txt.traversal.file_entry import FileEntry
from aggregate_to_txt.traversal.walker import check_root, walk


class StreamingAggregator:
    """Streaming directory aggregator producing a self-describing text archive.

    In archive mode every file below the root becomes one archive block; directories
    produce no output. In dry-run mode nothing is encoded: each directory and file is
    listed with its classification (binary verdicts from content sniffing are
    explained by the offending byte), followed by a summary of unknown extensions that
    were treated as binary.

    Failures are isolated per file. A file classified as text that turns out not to be
    valid UTF-8 is encoded again as binary. A file that cannot be read is reported to
    the session and skipped.

    Streaming properties:
    - Each stream can only be consumed once
    - Counters are updated as entries are processed and are final once streaming_complete is True

    Attributes:
        configuration (Configuration): Settings for the run.
        session (Session): Diagnostic state collected during the run.

    Example:
        >>> from aggregate_to_txt.config import Configuration
        >>> aggregator = StreamingAggregator(Configuration(Path("project")))  # doctest: +SKIP
        >>> for chunk in aggregator.stream():  # doctest: +SKIP
        ...     print(chunk, end="")
        --- Text file: project/readme
        --- Last modified: 2024-05-01T09:30:00.000Z
        --- SHA256: 5891b5b522d5df086d0ff0b110fbd9d21bb4fc7163af34d08286a2e846f6be03
        --- file contents, total lines: 1 ---
        hello
        --- end of file ---

    Raises:
        RootNotFoundError: If the root directory does not exist or is not a directory.
    """

    def __init__(
        self,
        configuration: Configuration,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        session: Optional[Session] = None,
    ) -> None:
        """Initialize an aggregation run.

        Args:
            configuration: Settings for the run.
            exclusion_rules: Optional rules removing entries from the traversal.
            session: Diagnostic accumulator. A new Session writing to stderr is created if
                None.

        Raises:
            RootNotFoundError: If the root directory does not exist or is not a directory.
        """
        self.root_path: Path = check_root(configuration.root_path)
        self.configuration = configuration
        self.session = session if session is not None else Session()
        self._exclusion_rules = exclusion_rules
        self._encoder = ArchiveEncoder(configuration)

        self._file_count = 0
        self._directory_count = 0
        self._text_count = 0
        self._binary_count = 0
        self._streamed = False
        self._complete = False

    @property
    def file_count(self) -> int:
        """Number of files processed so far, including skipped unreadable ones."""
        return self._file_count

    @property
    def directory_count(self) -> int:
        """Number of directories seen so far (excluding the root)."""
        return self._directory_count

    @property
    def text_count(self) -> int:
        """Number of files emitted or reported as text."""
        return self._text_count

    @property
    def binary_count(self) -> int:
        """Number of files emitted or reported as binary."""
        return self._binary_count

    @property
    def streaming_complete(self) -> bool:
        """Whether the run has been streamed to the end."""
        return self._complete

    def _entries(self) -> Iterator[FileEntry]:
        if self._streamed:
            raise RuntimeError("Aggregation has already been streamed")
        self._streamed = True
        return walk(self.root_path, self._exclusion_rules, on_error=self._on_walk_error)

    def _on_walk_error(self, path: str, error: OSError) -> None:
        self.session.record_failure(path, error)

    def _classify(self, entry: FileEntry) -> Optional[ClassificationResult]:
        """Classify a file, or report it and return None if it cannot be read."""
        try:
            return classify_file(entry.path, self.session.unknown_binary_extensions)
        except OSError as e:
            self.session.record_failure(str(entry.path), e)
            return None

    def _count(self, classification: Classification) -> None:
        if classification is Classification.BINARY:
            self._binary_count += 1
        else:
            self._text_count += 1

    def encode_entry(self, entry: FileEntry, classification: Classification) -> Optional[ArchiveBlock]:
        """Encode one file, falling back to binary when its text is not valid UTF-8.

        Args:
            entry: The file to encode.
            classification: The classifier's verdict for the file.

        Returns:
            The archive block, or None if the file could not be read.
        """
        try:
            try:
                block = self._encoder.encode(entry.path, classification)
            except TextDecodeError as e:
                self.session.record_fallback(str(entry.path), e)
                block = self._encoder.encode(entry.path, Classification.BINARY)
        except OSError as e:
            self.session.record_failure(str(entry.path), e)
            return None

        self._count(block.classification)
        return block

    def stream_archive(self) -> Iterator[str]:
        """Stream the archive, one rendered block per file.

        Returns:
            Iterator yielding the text of each archive block, in traversal order.

        Raises:
            RuntimeError: If the aggregation has already been streamed.
        """
        for entry in self._entries():
            if entry.is_directory:
                self._directory_count += 1
                continue

            self._file_count += 1
            result = self._classify(entry)
            if result is None:
                continue

            block = self.encode_entry(entry, result.classification)
            if block is not None:
                yield block.render()

        self._complete = True

    def stream_report(self) -> Iterator[str]:
        """Stream the dry-run report, one line per entry followed by the summary.

        A file found to be binary by content sniffing is preceded by a line giving the
        offset and value of the control byte that decided it.

        Returns:
            Iterator yielding newline-terminated report lines.

        Raises:
            RuntimeError: If the aggregation has already been streamed.
        """
        for entry in self._entries():
            if entry.is_directory:
                self._directory_count += 1
                yield f"Dir    {entry.path}\n"
                continue

            self._file_count += 1
            result = self._classify(entry)
            if result is None:
                continue

            evidence = result.evidence_line()
            if evidence is not None:
                yield evidence + "\n"
            self._count(result.classification)
            yield f"File {result.classification.tag} {entry.path}\n"

        for line in self.session.summary_lines():
            yield line + "\n"
        self._complete = True

    def stream(self) -> Iterator[str]:
        """Stream the report in dry-run mode and the archive otherwise."""
        if self.configuration.dry_run:
            return self.stream_report()
        return self.stream_archive()
