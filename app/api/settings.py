"""Settings endpoint exposing non-secret configuration."""
from typing import Optional

from flask import Blueprint, request, jsonify, current_app


settings_blueprint = Blueprint("settings", __name__)

NOT_CONFIGURED = "Not configured"
TOKEN_PREFIX_LENGTH = 20


def mask_token(token: Optional[str]) -> str:
    """Keep a fixed-length prefix of a credential, never the full value."""
    if not token:
        return NOT_CONFIGURED
    return f"{token[:TOKEN_PREFIX_LENGTH]}..."


def build_webhook_url() -> str:
    """Webhook URL as seen by the caller, honoring proxy headers."""
    protocol = request.headers.get("X-Forwarded-Proto") or request.scheme
    return f"{protocol}://{request.host}/webhook"


@settings_blueprint.route("/api/settings", methods=["GET"])
def get_settings():
    config = current_app.config
    return jsonify({
        "webhook_url": build_webhook_url(),
        "verify_token": config.get("VERIFY_TOKEN") or NOT_CONFIGURED,
        "phone_number_id": config.get("PHONE_NUMBER_ID") or NOT_CONFIGURED,
        "whatsapp_token": mask_token(config.get("WHATSAPP_TOKEN")),
        "server_status": "Running",
        "port": config.get("PORT")
    }), 200
