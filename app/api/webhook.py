"""Webhook endpoints for the WhatsApp Cloud API."""
import logging

from flask import Blueprint, request, current_app

from app.decorators.security import signature_required
from app.domain.exceptions import WebhookStructureError
from app.utils.webhook_parser import WebhookParser


webhook_blueprint = Blueprint("webhook", __name__)
_logger = logging.getLogger(__name__)


def verify():
    """
    Verify webhook subscription (required by Meta).

    Returns:
        The challenge with 200, or an empty 403
    """
    mode = request.args.get("hub.mode")
    token = request.args.get("hub.verify_token")
    challenge = request.args.get("hub.challenge")
    verify_token = current_app.config.get("VERIFY_TOKEN")

    _logger.info(f"Webhook verification attempt: mode={mode}, token={'***' if token else 'missing'}")

    if mode == "subscribe" and verify_token and token == verify_token:
        _logger.info("WEBHOOK_VERIFIED")
        return challenge or "", 200

    _logger.info("VERIFICATION_FAILED")
    return "", 403


def handle_message():
    """
    Handle incoming webhook events.

    Returns:
        ``EVENT_RECEIVED`` with 200 once the envelope is accepted, an empty 404
        for foreign envelopes and an empty 500 for structural faults
    """
    body = request.get_json(silent=True)

    if not WebhookParser.is_business_account(body):
        _logger.warning("Not a WhatsApp business account webhook")
        return "", 404

    container = current_app.config["service_container"]
    try:
        summary = container.get_ingestion_service().process(body)
    except WebhookStructureError as e:
        _logger.error(f"Error processing webhook: {e}")
        return "", 500

    _logger.info(
        f"Webhook processed: stored={summary.stored}, failed={summary.failed}, "
        f"statuses={summary.statuses}"
    )
    return "EVENT_RECEIVED", 200


@webhook_blueprint.route("/webhook", methods=["GET"])
def webhook_get():
    """Handle webhook verification (GET request)."""
    return verify()


@webhook_blueprint.route("/webhook", methods=["POST"])
@signature_required
def webhook_post():
    """
    Handle incoming webhook events (POST request).

    Signature checked when APP_SECRET is configured.
    """
    return handle_message()
