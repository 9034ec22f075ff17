"""Mini README: CSV export of the budget.

Exposes the row builder, the plain CSV renderer and the file exporter used by
both the dashboard download and the command line.
"""

from .csv_exporter import (
    EXPORT_HEADER,
    CsvExporter,
    build_export_rows,
    export_filename,
    render_csv,
)

__all__ = ["CsvExporter", "EXPORT_HEADER", "build_export_rows", "export_filename", "render_csv"]
