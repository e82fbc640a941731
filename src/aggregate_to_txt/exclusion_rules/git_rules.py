"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from aggregate_to_txt.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using standard .gitignore pattern matching via the pathspec library.

    Patterns can come from files (load_rules) or be added one at a time (add_rule). All
    patterns are kept in the order they were given, so a later negation (``!pattern``)
    can re-include what an earlier pattern excluded, exactly as in Git.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.o")
        >>> rules.add_rule("build/")
        >>> rules.exclude("src/main.o")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/main.c")
        False

    Note:
        Paths passed to exclude() should use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    @property
    def rule_count(self) -> int:
        """Number of patterns loaded so far, including comments and blank lines."""
        return len(self._patterns)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()

            self._extend([GitWildMatchPattern(line) for line in lines])

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as ``*.pyc`` or ``!keep.pyc``."""
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: List[GitWildMatchPattern]) -> None:
        self._patterns.extend(patterns)
        self.spec = PathSpec(self._patterns)
