"""Public data structures describing a simplified GA4 report query."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Literal, NotRequired, TypedDict

from google.api_core import exceptions

__all__ = ["FilterSpec", "InvalidReportQuery", "MatchType", "ReportQuery"]

MatchType = Literal[
    "EXACT",
    "BEGINS_WITH",
    "ENDS_WITH",
    "CONTAINS",
    "FULL_REGEXP",
    "PARTIAL_REGEXP",
]


class InvalidReportQuery(exceptions.InvalidArgument):
    """Raised when a query cannot be mapped onto a report request."""


class FilterSpec(TypedDict):
    """Typed mapping describing a string filter on a single field."""

    field: str
    value: str
    matchType: NotRequired[MatchType | None]
    caseSensitive: NotRequired[bool | None]


@dataclass
class ReportQuery:
    """A single report request in its simplified, flat form."""

    start_date: str | date
    end_date: str | date
    dimensions: List[str]
    metrics: List[str]
    filters: List[FilterSpec] = field(default_factory=list)
    not_filters: List[FilterSpec] = field(default_factory=list)
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        self.dimensions = _normalize_names(self.dimensions)
        self.metrics = _normalize_names(self.metrics)
        for name in ("limit", "offset"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidReportQuery(f"{name} must be a non-negative integer")

    @classmethod
    def from_payload(cls, payload: Any) -> "ReportQuery":
        """Build a query from the camelCase JSON body of a report request.

        ``filters`` and ``notFilters`` that are missing or not lists are
        treated as empty. A ``null`` ``limit`` or ``offset`` counts as absent.
        """

        if not isinstance(payload, Mapping):
            raise InvalidReportQuery("request body must be a JSON object")

        return cls(
            start_date=payload.get("startDate"),
            end_date=payload.get("endDate"),
            dimensions=_name_list(payload, "dimensions"),
            metrics=_name_list(payload, "metrics"),
            filters=_filter_list(payload.get("filters")),
            not_filters=_filter_list(payload.get("notFilters")),
            limit=payload.get("limit"),
            offset=payload.get("offset"),
        )


def _normalize_names(names: str | Sequence[str]) -> List[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


def _name_list(payload: Mapping[str, Any], key: str) -> List[str]:
    names = payload.get(key)
    if not isinstance(names, list):
        raise InvalidReportQuery(f"{key} must be a list of names")
    return list(names)


def _filter_list(filters: Any) -> List[FilterSpec]:
    if not isinstance(filters, list):
        return []
    return list(filters)
