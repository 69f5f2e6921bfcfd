"""Health check endpoints."""
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify

health_blueprint = Blueprint("health", __name__)

_started_at = time.monotonic()


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with status, ISO timestamp and process uptime in seconds
    """
    return jsonify({
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "uptime": round(time.monotonic() - _started_at, 3)
    }), 200
