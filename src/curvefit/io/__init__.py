"""I/O module for CurveFit.

Handles file operations including:
- x+y data files
- Configuration file loading/saving (TOML)
- Result file output
"""

from curvefit.io.config import generate_default_config, load_config, save_config
from curvefit.io.output import write_outputs
from curvefit.io.xy import append_xy_file, load_xy_file, string_to_number, write_xy_file

__all__ = [
    "append_xy_file",
    "generate_default_config",
    "load_config",
    "save_config",
    "string_to_number",
    "write_outputs",
    "write_xy_file",
    "load_xy_file",
]
