"""Tests for assembling report request fields from a query."""

from __future__ import annotations

from datetime import date

import pytest
from google.analytics.data_v1beta.types import Filter, RunReportRequest

from ga4report import ReportQuery, build_report_request
from ga4report.core.request import property_resource_name


def _query(**overrides) -> ReportQuery:
    arguments = dict(
        start_date="2024-01-01",
        end_date="2024-01-31",
        dimensions=["country"],
        metrics=["activeUsers"],
    )
    arguments.update(overrides)
    return ReportQuery(**arguments)


def test_minimal_query_has_no_optional_fields() -> None:
    request = build_report_request(_query(), "123456")

    assert request == {
        "property": "properties/123456",
        "date_ranges": [{"start_date": "2024-01-01", "end_date": "2024-01-31"}],
        "dimensions": [{"name": "country"}],
        "metrics": [{"name": "activeUsers"}],
    }


def test_single_filter_builds_exact_case_insensitive_leaf() -> None:
    request = build_report_request(
        _query(filters=[{"field": "country", "value": "US"}]), "123456"
    )

    assert request["dimension_filter"] == {
        "and_group": {
            "expressions": [
                {
                    "filter": {
                        "field_name": "country",
                        "string_filter": {
                            "value": "US",
                            "match_type": Filter.StringFilter.MatchType.EXACT,
                            "case_sensitive": False,
                        },
                    }
                }
            ]
        }
    }


def test_filters_and_not_filters_are_ordered_and_negated() -> None:
    request = build_report_request(
        _query(
            filters=[{"field": "country", "value": "US"}],
            not_filters=[
                {"field": "city", "value": "Berlin", "matchType": "CONTAINS", "caseSensitive": True}
            ],
        ),
        "123456",
    )

    positive, negated = request["dimension_filter"]["and_group"]["expressions"]
    assert positive["filter"]["field_name"] == "country"
    assert negated == {
        "not_expression": {
            "filter": {
                "field_name": "city",
                "string_filter": {
                    "value": "Berlin",
                    "match_type": Filter.StringFilter.MatchType.CONTAINS,
                    "case_sensitive": True,
                },
            }
        }
    }


@pytest.mark.parametrize("limit, offset", [(0, 0), (100, 0), (0, 50), (250, 1000)])
def test_limit_and_offset_are_forwarded_when_present(limit: int, offset: int) -> None:
    request = build_report_request(_query(limit=limit, offset=offset), "123456")

    assert request["limit"] == limit
    assert request["offset"] == offset


def test_only_provided_paging_field_is_forwarded() -> None:
    request = build_report_request(_query(offset=0), "123456")

    assert "limit" not in request
    assert request["offset"] == 0


def test_dimension_and_metric_order_is_preserved() -> None:
    request = build_report_request(
        _query(
            dimensions=["date", "country", "city"],
            metrics=["sessions", "activeUsers"],
        ),
        "123456",
    )

    assert request["dimensions"] == [{"name": "date"}, {"name": "country"}, {"name": "city"}]
    assert request["metrics"] == [{"name": "sessions"}, {"name": "activeUsers"}]


def test_date_objects_and_relative_keywords_are_rendered_as_strings() -> None:
    request = build_report_request(
        _query(start_date=date(2024, 3, 1), end_date="yesterday"), "123456"
    )

    assert request["date_ranges"] == [{"start_date": "2024-03-01", "end_date": "yesterday"}]


@pytest.mark.parametrize(
    "property_id, expected",
    [(123456, "properties/123456"), ("123456", "properties/123456"), ("properties/9", "properties/9")],
)
def test_property_resource_name(property_id, expected) -> None:
    assert property_resource_name(property_id) == expected


def test_request_fields_are_accepted_by_run_report_request() -> None:
    fields = build_report_request(
        _query(
            filters=[{"field": "country", "value": "US"}],
            not_filters=[{"field": "city", "value": "Berlin", "matchType": "CONTAINS"}],
            limit=10,
        ),
        "123456",
    )

    request = RunReportRequest(fields)

    assert request.property == "properties/123456"
    expressions = request.dimension_filter.and_group.expressions
    assert len(expressions) == 2
    assert expressions[0].filter.string_filter.value == "US"
    assert expressions[1].not_expression.filter.field_name == "city"
    assert (
        expressions[1].not_expression.filter.string_filter.match_type
        == Filter.StringFilter.MatchType.CONTAINS
    )
    assert request.limit == 10


def test_single_dimension_string_is_one_name() -> None:
    request = build_report_request(_query(dimensions="country", metrics="activeUsers"), "123456")

    assert request["dimensions"] == [{"name": "country"}]
    assert request["metrics"] == [{"name": "activeUsers"}]
