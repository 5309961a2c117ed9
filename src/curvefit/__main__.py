"""Allow ``python -m curvefit``."""

from curvefit.cli.app import app

if __name__ == "__main__":
    app()
