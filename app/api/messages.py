"""Messages API endpoints: outbound relay and received message history."""
import logging

from flask import Blueprint, request, jsonify, current_app

from app.domain.exceptions import ConfigurationError
from app.middleware.monitoring import track_outbound_message
from app.utils.phone_validator import PhoneNumberValidator


messages_blueprint = Blueprint("messages", __name__)
_logger = logging.getLogger(__name__)


@messages_blueprint.route("/api/send-message", methods=["POST"])
def send_message():
    """
    Send a WhatsApp text message through the Graph API.

    Expected payload:
    {
        "to": "1234567890",  # Phone number with country code
        "message": "Your message text here"
    }

    Returns:
        200 with the Graph API message ID, 400 on invalid input, 500 on
        missing configuration or upstream failure
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}

    to_number = body.get("to")
    message_text = body.get("message")

    if not to_number or not message_text:
        return jsonify({
            "success": False,
            "error": 'Missing required fields: "to" and "message"'
        }), 400

    if not isinstance(message_text, str):
        return jsonify({"success": False, "error": '"message" must be a string'}), 400

    try:
        recipient = PhoneNumberValidator.normalize(to_number)
    except ValueError as e:
        return jsonify({"success": False, "error": str(e)}), 400

    provider = current_app.config["service_container"].get_message_provider()

    try:
        result = provider.send_text_message(recipient, message_text)
    except ConfigurationError as e:
        _logger.error(f"Send rejected: {e}")
        return jsonify({"success": False, "error": str(e)}), 500

    track_outbound_message(result.ok)

    if result.ok:
        _logger.info(f"Message sent successfully to {recipient}: id={result.message_id}")
        return jsonify({
            "success": True,
            "messageId": result.message_id,
            "data": result.response
        }), 200

    _logger.error(f"Failed to send message: {result.error_message}")
    payload = {"success": False, "error": result.error_message}
    if result.response is not None:
        payload["details"] = result.response
    return jsonify(payload), 500


@messages_blueprint.route("/api/messages", methods=["GET"])
def list_messages():
    """Return received messages, newest first."""
    store = current_app.config["service_container"].get_message_store()
    records = store.list()
    return jsonify({
        "success": True,
        "count": len(records),
        "messages": [record.to_dict() for record in records]
    }), 200
