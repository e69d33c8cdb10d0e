"""Helpers for turning report dictionaries into dataframes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd


def _header_names(report: Mapping[str, Any], key: str) -> list[str]:
    return [header["name"] for header in report.get(key) or []]


def _cell_values(row: Mapping[str, Any], key: str) -> list[Any]:
    return [cell.get("value") for cell in row.get(key) or []]


def report_to_dataframe(report: Mapping[str, Any]) -> pd.DataFrame:
    """Return one row per report row with dimension then metric columns.

    ``report`` is the camelCase dict produced by
    :meth:`ga4report.GA4Reporter.run_report`. Metric columns are converted
    to numbers; dimension columns stay as strings.
    """

    dimension_names = _header_names(report, "dimensionHeaders")
    metric_names = _header_names(report, "metricHeaders")
    columns = [*dimension_names, *metric_names]

    records = [
        _cell_values(row, "dimensionValues") + _cell_values(row, "metricValues")
        for row in report.get("rows") or []
    ]
    df = pd.DataFrame.from_records(records, columns=columns)
    for name in metric_names:
        df[name] = pd.to_numeric(df[name])
    return df
