"""Console-based reporter implementation using Rich.

Adapts the Reporter protocol to the UI message helpers. Per-shape actions
are only shown at verbose level. Nothing is logged here; pair it with a
LoggingReporter to also record messages in the log file.
"""

from __future__ import annotations

from curvefit.ui.console import Verbosity, get_verbosity
from curvefit.ui.messages import action, error, info, success, warning


class ConsoleReporter:
    """Reporter implementation using Rich console output.

    Example:
        >>> reporter = ConsoleReporter()
        >>> reporter.action("Guessing Linear fit...")
        >>> reporter.success("Best fit: Linear")
    """

    def action(self, message: str) -> None:
        """Display an action message (verbose only)."""
        if get_verbosity() >= Verbosity.VERBOSE:
            action(message, do_log=False)

    def info(self, message: str) -> None:
        """Display an informational message (verbose only)."""
        if get_verbosity() >= Verbosity.VERBOSE:
            info(message, indent=1, do_log=False)

    def warning(self, message: str) -> None:
        """Display a warning message."""
        warning(message, do_log=False)

    def error(self, message: str) -> None:
        """Display an error message."""
        error(message, do_log=False)

    def success(self, message: str) -> None:
        """Display a success message."""
        success(message, do_log=False)


__all__ = ["ConsoleReporter"]
