"""
Health check route.
"""

from flask import Blueprint, jsonify

from gads_mock.report import utc_timestamp

bp = Blueprint('health', __name__)


@bp.route("/health", methods=["GET"])
def health():
    """
    Liveness probe.

    Returns JSON:
        {"status": "ok", "timestamp": str}
    """
    return jsonify({"status": "ok", "timestamp": utc_timestamp()})
