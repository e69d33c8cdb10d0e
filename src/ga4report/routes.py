"""Report endpoint blueprint."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from .core import GA4Reporter, ReportQuery

bp = Blueprint("report", __name__)


def get_reporter() -> GA4Reporter:
    return current_app.extensions["reporter"]


def _error_message(exc: Exception) -> str:
    # GoogleAPICallError prefixes str() with the HTTP status code.
    message = getattr(exc, "message", None)
    return message if isinstance(message, str) else str(exc)


@bp.route("/report", methods=["POST"])
def report():
    try:
        query = ReportQuery.from_payload(request.get_json(silent=True))
        result = get_reporter().run_report(query)
    except Exception as exc:
        current_app.logger.exception("GA4 API Error")
        return jsonify({"error": _error_message(exc)}), 500
    return jsonify(result), 200


__all__ = ["bp", "get_reporter"]
