"""Command-line argument parsing for aggregate_to_txt.

This module defines the command-line interface for aggregate_to_txt,
handling argument parsing, validation and conversion into a run Configuration.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from aggregate_to_txt import __version__
from aggregate_to_txt.config import Configuration
from aggregate_to_txt.exclusion_rules.base_rules import BaseExclusionRules
from aggregate_to_txt.locale_strings import LOCALES, get_locale_strings


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusion options into a rules object.

    Rules are added as the options are parsed, so file-based (-e) and pattern-based (-i)
    exclusions keep the order in which they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action adding -e/--exclude files and -i/--ignore patterns to the exclusion rules."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:
                exclusion_rules.add_rule(str(values))

            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with aggregate_to_txt's options.
    """
    description = f"""
    aggregate_to_txt v{__version__}

    Create a text file containing all files from the root directory, with their names,
    modification dates and SHA-256 hashes. Text files are included as is, binary files
    as a hex dump or base64. The result is human-readable (especially without base64)
    and carries everything needed to restore the source file tree.

    The archive is written to stdout unless -o/--output is given.
    """

    epilog = """
    Examples:
      # Archive a directory into a text file
      aggregate_to_txt /path/to/project > project.txt

      # Encode binary files as base64 instead of a hex dump
      aggregate_to_txt -b /path/to/project

      # Only show how each file would be classified
      aggregate_to_txt -d /path/to/project

      # Russian header and footer labels
      aggregate_to_txt --ru /path/to/project

      # Skip files using gitignore-style rules
      aggregate_to_txt -e .gitignore -i "*.log" /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="aggregate_to_txt",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"aggregate_to_txt {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "root",
        type=Path,
        help="The root directory to aggregate.",
    )
    parser.add_argument(
        "-d",
        "--dry",
        action="store_true",
        help="Dry run: list directories and files with their text/binary classification, without contents.",
    )
    parser.add_argument(
        "-b",
        "--base64",
        action="store_true",
        help="Use base64 for binary files instead of a hex dump.",
    )
    parser.add_argument(
        "-l",
        "--locale",
        choices=sorted(LOCALES),
        default="en",
        help="Language of header and footer labels (default: en).",
    )
    parser.add_argument(
        "--ru",
        dest="locale",
        action="store_const",
        const="ru",
        help="Use Russian labels (same as --locale ru).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style exclusion file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude files and directories. Can be specified "
            "multiple times; patterns are applied in command-line order, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If the output file would be written inside the archived tree.
    """
    if args.output is not None and not args.dry:
        root = args.root.resolve()
        output = args.output.resolve()
        if root in output.parents:
            raise ValueError(f"Output file {args.output} must not be inside the root directory {args.root}")


def build_configuration(args: argparse.Namespace) -> Configuration:
    """Convert parsed arguments into the immutable run configuration."""
    return Configuration(
        root_path=args.root,
        dry_run=args.dry,
        use_base64=args.base64,
        strings=get_locale_strings(args.locale),
    )
