"""Result writers (JSON, CSV, text)."""

from curvefit.io.writers.csv_writer import CSVWriter, write_csv
from curvefit.io.writers.json_writer import JSONWriter, NumpyEncoder, write_json
from curvefit.io.writers.txt_writer import format_summary, write_txt

__all__ = [
    "CSVWriter",
    "JSONWriter",
    "NumpyEncoder",
    "format_summary",
    "write_csv",
    "write_json",
    "write_txt",
]
