"""Primary client for running GA4 Data API reports."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pandas as pd
from google.analytics.data_v1beta import BetaAnalyticsDataClient
from google.analytics.data_v1beta.types import RunReportRequest, RunReportResponse
from google.auth.credentials import Credentials
from google.oauth2 import service_account

from .dataframe import report_to_dataframe
from .request import build_report_request
from .types import ReportQuery

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger("ga4report")


class GA4Reporter:
    """Minimal GA4 Data API client bound to a single property."""

    def __init__(
        self,
        property_id: int | str,
        *,
        client: BetaAnalyticsDataClient | None = None,
        credentials: Credentials | None = None,
    ) -> None:
        self.property_id = str(property_id)
        self.client = client or BetaAnalyticsDataClient(credentials=credentials)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GA4Reporter":
        """Create a reporter using the service-account file from ``settings``.

        Falls back to application default credentials when the file does not
        exist.
        """

        credentials = None
        if settings.credentials_file.is_file():
            credentials = service_account.Credentials.from_service_account_file(
                str(settings.credentials_file)
            )
        else:
            logger.warning(
                "Credentials file %s not found, using application default credentials",
                settings.credentials_file,
            )
        return cls(settings.property_id, credentials=credentials)

    def build_request(self, query: ReportQuery) -> dict[str, Any]:
        """Return the request fields for ``query`` on this reporter's property."""

        return build_report_request(query, self.property_id)

    def _run(self, request: dict[str, Any]) -> RunReportResponse:
        """Submit ``request`` once and return the raw response message."""

        return self.client.run_report(RunReportRequest(request))

    def run_report(self, query: ReportQuery) -> dict[str, Any]:
        """Run ``query`` and return the report as a JSON-compatible dict."""

        request = self.build_request(query)
        logger.info(
            "Running report for %s | %s -> %s | dims=%s metrics=%s",
            request["property"],
            query.start_date,
            query.end_date,
            query.dimensions,
            query.metrics,
        )
        response = self._run(request)
        logger.info("Retrieved %d rows", response.row_count)
        return RunReportResponse.to_dict(
            response,
            use_integers_for_enums=False,
            preserving_proto_field_name=False,
        )

    def run_report_dataframe(self, query: ReportQuery) -> pd.DataFrame:
        """Run ``query`` and return the rows as a dataframe."""

        return report_to_dataframe(self.run_report(query))
