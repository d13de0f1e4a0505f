"""
Reporting — отображение результатов расчёта нуклидов.
"""

from src.reporting.report import (
    FOOTER,
    HEADER,
    MAX_PRECISION,
    MIN_PRECISION,
    REPORT_SCHEMA_VERSION,
    ReportConfig,
    format_report,
    isotope_report_dict,
    print_report,
)

__all__ = [
    "HEADER",
    "FOOTER",
    "MIN_PRECISION",
    "MAX_PRECISION",
    "REPORT_SCHEMA_VERSION",
    "ReportConfig",
    "format_report",
    "print_report",
    "isotope_report_dict",
]
