"""Console configuration and theme for CurveFit UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os
import sys
from importlib import metadata

from rich.console import Console
from rich.theme import Theme

try:
    _PKG_VERSION = metadata.version("curvefit")
except metadata.PackageNotFoundError:
    _PKG_VERSION = "dev"

CURVEFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "neutral": "dim white",
        # --- UI Structure ---
        "header": "bold cyan",
        "subheader": "bold white",
        "panel.border": "blue",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "number": "green",
        "path": "blue underline",
        "code": "bold magenta",
        # --- Modifiers ---
        "dim": "dim",
        "emphasis": "bold",
    }
)

# Single console instance for entire application
console = Console(theme=CURVEFIT_THEME)

VERSION = _PKG_VERSION


class Verbosity:
    """Verbosity levels for UI output."""

    QUIET = 0  # Errors only
    NORMAL = 1  # Standard output
    VERBOSE = 2  # Per-shape progress


_verbosity = Verbosity.NORMAL


def set_verbosity(level: int) -> None:
    """Set the global verbosity level.

    Args:
        level: Verbosity level (0=QUIET, 1=NORMAL, 2=VERBOSE)
    """
    global _verbosity
    _verbosity = level
    console.quiet = level == Verbosity.QUIET


def get_verbosity() -> int:
    """Get the current verbosity level."""
    return _verbosity


_EMOJI_DISABLED = os.getenv("CURVEFIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_emoji() -> bool:
    """Best-effort detection if the terminal supports Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet
    """
    use_unicode = _supports_emoji()
    mapping = {
        "check": "✓" if use_unicode else "+",
        "warn": "⚠" if use_unicode else "!",
        "error": "✗" if use_unicode else "x",
        "info": "▸" if use_unicode else ">",
        "bullet": "‣" if use_unicode else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = [
    "CURVEFIT_THEME",
    "VERSION",
    "Verbosity",
    "console",
    "get_verbosity",
    "icon",
    "set_verbosity",
]
