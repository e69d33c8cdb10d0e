from .client import GA4Reporter
from .filters import build_filter_expression
from .request import build_report_request, property_resource_name
from .types import FilterSpec, InvalidReportQuery, MatchType, ReportQuery

__all__ = [
    "GA4Reporter",
    "FilterSpec",
    "InvalidReportQuery",
    "MatchType",
    "ReportQuery",
    "build_filter_expression",
    "build_report_request",
    "property_resource_name",
]
