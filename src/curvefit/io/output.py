"""Write every configured output for a fit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from curvefit.io.writers import write_csv, write_json, write_txt

if TYPE_CHECKING:
    from pathlib import Path

    from curvefit.core.domain.config import OutputConfig
    from curvefit.core.results.bundle import OutputBundle

WRITERS = {
    "json": write_json,
    "csv": write_csv,
    "txt": write_txt,
}


def write_outputs(bundle: OutputBundle, config: OutputConfig, stem: str = "fit") -> list[Path]:
    """Write the bundle in each configured format.

    Args:
        bundle: Result to write
        config: Output configuration (directory, formats, figures)
        stem: Base file name

    Returns
    -------
        Paths of the written files
    """
    config.directory.mkdir(parents=True, exist_ok=True)
    written = []
    for fmt in dict.fromkeys(config.formats):
        path = config.directory / f"{stem}.{fmt}"
        WRITERS[fmt](bundle, path)
        written.append(path)

    if config.save_figures:
        from curvefit.plotting import save_fit_figure

        path = config.directory / f"{stem}.png"
        save_fit_figure(bundle, path)
        written.append(path)

    return written


__all__ = ["WRITERS", "write_outputs"]
