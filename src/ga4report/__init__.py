"""Public package API."""

from importlib import metadata

from .core import (
    FilterSpec,
    GA4Reporter,
    InvalidReportQuery,
    MatchType,
    ReportQuery,
    build_report_request,
)
from .core.dataframe import report_to_dataframe

__all__ = [
    "GA4Reporter",
    "ReportQuery",
    "FilterSpec",
    "MatchType",
    "InvalidReportQuery",
    "build_report_request",
    "report_to_dataframe",
]

try:
    __version__ = metadata.version("ga4report")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
