from __future__ import annotations

from typing import Any

import pytest
from google.analytics.data_v1beta.types import RunReportRequest, RunReportResponse

from ga4report import GA4Reporter


class FakeDataClient:
    """Stand-in for ``BetaAnalyticsDataClient`` that records submitted requests."""

    def __init__(self, response: RunReportResponse | None = None, error: Exception | None = None):
        self.response = response if response is not None else RunReportResponse()
        self.error = error
        self.requests: list[RunReportRequest] = []

    def run_report(self, request: RunReportRequest) -> RunReportResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


def make_response(rows: list[tuple[list[str], list[str]]], dimensions: list[str], metrics: list[str]) -> RunReportResponse:
    payload: dict[str, Any] = {
        "dimension_headers": [{"name": name} for name in dimensions],
        "metric_headers": [{"name": name} for name in metrics],
        "rows": [
            {
                "dimension_values": [{"value": value} for value in dims],
                "metric_values": [{"value": value} for value in mets],
            }
            for dims, mets in rows
        ],
        "row_count": len(rows),
    }
    return RunReportResponse(payload)


@pytest.fixture
def country_response() -> RunReportResponse:
    return make_response(
        rows=[(["US"], ["42"]), (["NO"], ["7"])],
        dimensions=["country"],
        metrics=["activeUsers"],
    )


@pytest.fixture
def fake_client(country_response: RunReportResponse) -> FakeDataClient:
    return FakeDataClient(response=country_response)


@pytest.fixture
def reporter(fake_client: FakeDataClient) -> GA4Reporter:
    return GA4Reporter("123456", client=fake_client)
