"""Signal handling utilities for the aggregate_to_txt CLI.

This module records SIGPIPE and SIGINT instead of letting them kill the process, so
that output already written stays intact and the run ends with the conventional exit
code for the signal.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# Exit codes follow the shell convention of 128 + signal number
EXIT_SIGINT = 130
EXIT_SIGPIPE = 141

# SIGPIPE does not exist on Windows
_SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Handles system signals for graceful interruption management.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        """Initialize signal handler with original handlers preserved."""
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(_SIGPIPE) if _SIGPIPE is not None else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        """True once either SIGPIPE or SIGINT has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit code matching the signal received, or None if there was none."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record SIGPIPE and restore the original handler."""
        self.sigpipe_received.set()
        if _SIGPIPE is not None:
            signal.signal(_SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record SIGINT and restore the original handler."""
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE (where available) and SIGINT."""
    if _SIGPIPE is not None:
        signal.signal(_SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit to keep the interpreter from reporting errors while flushing
    a stdout whose reader has gone away.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
