"""Utilities for translating flat filter lists into a Data API filter expression."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, get_args

from google.analytics.data_v1beta.types import Filter

from .types import FilterSpec, InvalidReportQuery, MatchType

_DEFAULT_MATCH_TYPE = "EXACT"
_MATCH_TYPES = frozenset(get_args(MatchType))


def build_filter_expression(
    filters: Sequence[FilterSpec] | None,
    not_filters: Sequence[FilterSpec] | None = None,
) -> dict[str, Any] | None:
    """Return an AND-group combining ``filters`` and negated ``not_filters``.

    Positive leaves come first, followed by the negated ones, each group in
    its input order. ``None`` is returned when both lists are empty so the
    caller can leave the field off the request entirely.
    """

    filters = filters or []
    not_filters = not_filters or []
    if not filters and not not_filters:
        return None

    expressions = [_parse_filter(filter_) for filter_ in filters]
    expressions.extend(
        {"not_expression": _parse_filter(filter_)} for filter_ in not_filters
    )
    return {"and_group": {"expressions": expressions}}


def _parse_filter(filter_: FilterSpec) -> dict[str, Any]:
    if not isinstance(filter_, Mapping):
        raise InvalidReportQuery("filter entries must be objects")
    for key in ("field", "value"):
        if filter_.get(key) is None:
            raise InvalidReportQuery(f"filter entry is missing {key!r}")

    case_sensitive = filter_.get("caseSensitive")
    return {
        "filter": {
            "field_name": filter_["field"],
            "string_filter": {
                "value": filter_["value"],
                "match_type": _match_type(filter_.get("matchType")),
                "case_sensitive": False if case_sensitive is None else case_sensitive,
            },
        }
    }


def _match_type(name: str | None) -> Filter.StringFilter.MatchType:
    """Resolve ``name`` to the client library enum, defaulting to ``EXACT``."""

    name = name or _DEFAULT_MATCH_TYPE
    normalized = str(name).upper()
    if normalized not in _MATCH_TYPES:
        raise InvalidReportQuery(f"Unsupported match type: {name}")
    return Filter.StringFilter.MatchType[normalized]
