"""UI and terminal output styling for CurveFit.

Submodules:
- console: Theme, console instance and verbosity
- logging: Logging setup (file and Rich handlers)
- messages: Status messages (success, error, warning, etc.)
- reporter: Reporter protocol implementation on the console
- tables: Table display utilities
"""

from curvefit.ui.console import (
    CURVEFIT_THEME,
    VERSION,
    Verbosity,
    console,
    get_verbosity,
    icon,
    set_verbosity,
)
from curvefit.ui.logging import close_logging, log, log_dict, setup_logging
from curvefit.ui.messages import action, error, info, success, warning
from curvefit.ui.reporter import ConsoleReporter
from curvefit.ui.tables import create_table, print_shape_table, print_summary


def show_version() -> None:
    """Print the installed version."""
    console.print(f"[header]CurveFit[/header] version [success]{VERSION}[/success]")


__all__ = [
    "CURVEFIT_THEME",
    "VERSION",
    "ConsoleReporter",
    "Verbosity",
    "action",
    "close_logging",
    "console",
    "create_table",
    "error",
    "get_verbosity",
    "icon",
    "info",
    "log",
    "log_dict",
    "print_shape_table",
    "print_summary",
    "set_verbosity",
    "setup_logging",
    "show_version",
    "success",
    "warning",
]
