from abc import ABC, abstractmethod
from typing import Sequence, Union

from aggregate_to_txt.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Traversal asks the rules about every entry's path relative to the root directory and
    skips the entry (and, for directories, everything below it) when exclude() returns
    True. Loading rules from files and adding single rules are optional capabilities.

    Example:
        >>> class TempFileRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith(".tmp")
        >>> rules = TempFileRules()
        >>> rules.exclude("build/cache.tmp")
        True
        >>> rules.exclude("main.c")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Path relative to the root directory, using forward slashes.
                Directories may be passed with a trailing slash.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
