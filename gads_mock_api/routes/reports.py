"""
Report routes - body variant (POST) and query/path variant (GET).
"""

from flask import Blueprint, current_app, jsonify, request

from gads_mock_api.auth import with_auth_status
from gads_mock_api.routes.shared import get_report_service
from gads_mock_api.validation import parse_report_body, parse_report_query

bp = Blueprint('reports', __name__)


@bp.route("/reports", methods=["POST"])
@with_auth_status
def create_report():
    """
    Generate a report from a JSON body.

    Request JSON:
        {
            "accountId": "123-456-7890",
            "dateRange": {"startDate": "2024-01-01", "endDate": "2024-01-07"},
            "dimensions": ["date", "campaign"],          # optional
            "metrics": ["impressions", "clicks", "cost"],  # optional
            "filters": {"campaignIds": [...], "campaignStatus": "ENABLED"},  # optional
            "pageSize": 100,                             # optional, 1-10000
            "pageToken": "100",                          # optional
            "orderBy": {"field": "cost", "direction": "DESC"}  # optional
        }

    Returns JSON:
        {"metadata": {...}, "rows": [...], "nextPageToken": str (only if more rows)}
    """
    data = request.get_json(silent=True)
    report_request = parse_report_body(data)

    current_app.logger.debug(f"Report request (body) for {report_request.account_id}")
    return jsonify(get_report_service().generate_report(report_request))


@bp.route("/accounts/<account_id>/reports", methods=["GET"])
@with_auth_status
def query_report(account_id: str):
    """
    Generate a report from query parameters.

    Example:
        GET /api/v1/gads/accounts/123-456-7890/reports?startDate=2024-01-01&endDate=2024-01-07
            &dimensions=date,device&metrics=clicks,cost&orderBy=cost&orderDirection=ASC
    """
    report_request = parse_report_query(account_id, request.args)

    current_app.logger.debug(f"Report request (query) for {report_request.account_id}")
    return jsonify(get_report_service().generate_report(report_request))
