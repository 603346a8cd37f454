"""Team report export."""

from .export import (
    REPORT_HEADERS,
    REPORT_MEDIA_TYPE,
    ReportMetadata,
    build_rows,
    escape_cell,
    report_filename,
    serialize,
)

__all__ = [
    "REPORT_HEADERS",
    "REPORT_MEDIA_TYPE",
    "ReportMetadata",
    "build_rows",
    "escape_cell",
    "report_filename",
    "serialize",
]
