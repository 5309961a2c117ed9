"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from curvefit.core.domain.config import CurveFitConfig
from curvefit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> CurveFitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        CurveFitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return CurveFitConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}:\n{exc}"
        raise ConfigError(msg) from exc


def save_config(config: CurveFitConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# CurveFit Configuration File
# Generated automatically - edit as needed

[fitting]
shapes = ["Linear", "Quadratic", "Cubic", "Polynomial4", "Polynomial5", "Polynomial6"]
weighting = "sqrt"  # sqrt (sigma = sqrt(y)) or none (plain least squares)
condition_threshold = 1e10
exact_tolerance = 1e-9  # exact when RSS <= exact_tolerance**2 * TSS

[extrapolation]
# ceiling = 10000.0  # Uncomment to extrapolate the trend up to this value
max_iterations = 100000
extra_x_values = []

[output]
directory = "Fits"
formats = ["json"]  # json, csv, txt
save_figures = false
log_format = "text"  # text or json
"""
