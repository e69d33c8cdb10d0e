"""Assembly of Data API report requests from :class:`ReportQuery` objects."""

from __future__ import annotations

from datetime import date
from typing import Any

from .filters import build_filter_expression
from .types import ReportQuery

_PROPERTY_PREFIX = "properties/"


def property_resource_name(property_id: int | str) -> str:
    """Return ``property_id`` as a ``properties/<id>`` resource name."""

    property_id = str(property_id)
    if property_id.startswith(_PROPERTY_PREFIX):
        return property_id
    return f"{_PROPERTY_PREFIX}{property_id}"


def build_report_request(query: ReportQuery, property_id: int | str) -> dict[str, Any]:
    """Return the ``RunReportRequest`` fields for ``query`` as a plain dict.

    Optional fields are only present when they carry a value: the filter
    expression when at least one filter was given, ``limit`` and ``offset``
    whenever they are not ``None`` (``0`` included).
    """

    request: dict[str, Any] = {
        "property": property_resource_name(property_id),
        "date_ranges": [
            {
                "start_date": _format_date(query.start_date),
                "end_date": _format_date(query.end_date),
            }
        ],
        "dimensions": [{"name": name} for name in query.dimensions],
        "metrics": [{"name": name} for name in query.metrics],
    }

    dimension_filter = build_filter_expression(query.filters, query.not_filters)
    if dimension_filter is not None:
        request["dimension_filter"] = dimension_filter
    if query.limit is not None:
        request["limit"] = query.limit
    if query.offset is not None:
        request["offset"] = query.offset
    return request


def _format_date(value: str | date) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return value
