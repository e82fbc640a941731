"""Command-line interface for aggregate_to_txt.

This module provides the entry point that turns a directory tree into a single
self-describing text archive. It handles argument parsing, output writing, error
reporting and signal management for graceful interruption handling.

Key Features:
    - Archive output with verbatim text and hex-dumped or base64 binary payloads
    - Dry-run classification report with unknown extension summary
    - English and Russian header labels
    - Exclusion rule support (e.g., .gitignore patterns)
    - Output redirection and file writing
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including a missing root directory)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Archive a directory
    $ aggregate_to_txt /path/to/dir > dir.txt

    # Report classification only
    $ aggregate_to_txt -d /path/to/dir
"""

import sys
import traceback

from aggregate_to_txt.aggregator import StreamingAggregator
from aggregate_to_txt.cli.argparser import build_configuration, create_parser, validate_args
from aggregate_to_txt.cli.safe_writer import SafeWriter
from aggregate_to_txt.cli.signal_handler import setup_signal_handling, signal_handler
from aggregate_to_txt.exceptions import RootNotFoundError
from aggregate_to_txt.exclusion_rules.git_rules import GitIgnoreExclusionRules


def main() -> None:
    """Main entry point for the aggregate_to_txt command-line interface.

    The root directory is validated before any output is opened, so a missing root
    produces an error message and no archive at all. Any other unexpected failure is
    reported with its traceback; output written before it is kept, and the dry-run
    summary is not printed.
    """
    setup_signal_handling()

    try:
        # Populated by the -e/-i actions while parsing
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)
        configuration = build_configuration(args)

        aggregator = StreamingAggregator(configuration, exclusion_rules=exclusion_rules)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                for chunk in aggregator.stream():
                    safe_writer.write(chunk)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except RootNotFoundError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
