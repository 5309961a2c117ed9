"""Progress and status reporting abstraction.

The fitting engine reports what it is doing (which shape is being guessed,
which shapes were skipped, which one won) through a small protocol so the
core never depends on a concrete UI.

    - Reporter protocol defines the contract
    - NullReporter discards everything (library default)
    - LoggingReporter forwards to the ``curvefit`` logger
    - CompositeReporter fans out to several reporters
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for progress and status reporting.

    All methods take plain strings to avoid coupling the engine to any
    specific output format or styling system.
    """

    def action(self, message: str) -> None:
        """Report an action being performed, e.g. 'Guessing Cubic fit...'."""
        ...

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Report a non-fatal issue, e.g. a shape that could not be solved."""
        ...

    def error(self, message: str) -> None:
        """Report an error."""
        ...

    def success(self, message: str) -> None:
        """Report successful completion."""
        ...


class NullReporter:
    """Silent reporter that discards all messages.

    Example:
        >>> reporter = NullReporter()
        >>> reporter.action("Guessing Linear fit...")  # No output
    """

    def action(self, message: str) -> None:
        """Discard action message."""

    def info(self, message: str) -> None:
        """Discard info message."""

    def warning(self, message: str) -> None:
        """Discard warning message."""

    def error(self, message: str) -> None:
        """Discard error message."""

    def success(self, message: str) -> None:
        """Discard success message."""


class LoggingReporter:
    """Reporter that writes to Python logging.

    Actions are logged at DEBUG level, since the engine emits one per
    candidate shape; everything else maps onto the matching logging level.

    Example:
        >>> reporter = LoggingReporter("curvefit.fitting")
        >>> reporter.action("Guessing Quadratic fit...")  # DEBUG level
        >>> reporter.warning("Skipping Polynomial6")  # WARNING level
    """

    def __init__(self, logger_name: str = "curvefit") -> None:
        """Initialize with a logger name.

        Args:
            logger_name: Name for the logger (default: 'curvefit')
        """
        self._logger = logging.getLogger(logger_name)

    def action(self, message: str) -> None:
        """Log action at DEBUG level."""
        self._logger.debug(message)

    def info(self, message: str) -> None:
        """Log info at INFO level."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Log warning at WARNING level."""
        self._logger.warning(message)

    def error(self, message: str) -> None:
        """Log error at ERROR level."""
        self._logger.error(message)

    def success(self, message: str) -> None:
        """Log success at INFO level with prefix."""
        self._logger.info("[SUCCESS] %s", message)


class CompositeReporter:
    """Reporter that delegates to multiple reporters.

    Example:
        >>> reporter = CompositeReporter([ConsoleReporter(), LoggingReporter()])
        >>> reporter.success("Done!")  # Goes to both reporters
    """

    def __init__(self, reporters: list[Reporter]) -> None:
        """Initialize with list of reporters.

        Args:
            reporters: List of reporters to delegate to
        """
        self._reporters = reporters

    def action(self, message: str) -> None:
        """Delegate action to all reporters."""
        for reporter in self._reporters:
            reporter.action(message)

    def info(self, message: str) -> None:
        """Delegate info to all reporters."""
        for reporter in self._reporters:
            reporter.info(message)

    def warning(self, message: str) -> None:
        """Delegate warning to all reporters."""
        for reporter in self._reporters:
            reporter.warning(message)

    def error(self, message: str) -> None:
        """Delegate error to all reporters."""
        for reporter in self._reporters:
            reporter.error(message)

    def success(self, message: str) -> None:
        """Delegate success to all reporters."""
        for reporter in self._reporters:
            reporter.success(message)


__all__ = [
    "CompositeReporter",
    "LoggingReporter",
    "NullReporter",
    "Reporter",
]
