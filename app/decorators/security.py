"""Webhook signature verification."""
import hashlib
import hmac
import logging
from functools import wraps

from flask import current_app, request

_logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Hub-Signature-256"


def validate_signature(payload: bytes, signature: str, app_secret: str) -> bool:
    """
    Validate a Meta ``sha256=<hex>`` HMAC signature of the raw body.

    Args:
        payload: Raw request body
        signature: Header value without the ``sha256=`` prefix
        app_secret: Meta App Secret

    Returns:
        True if the signature matches
    """
    expected_signature = hmac.new(
        app_secret.encode("utf-8"),
        msg=payload,
        digestmod=hashlib.sha256,
    ).hexdigest()
    return hmac.compare_digest(expected_signature, signature)


def signature_required(f):
    """
    Reject webhook calls whose signature does not match APP_SECRET.

    Verification is skipped when APP_SECRET is not configured.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        app_secret = current_app.config.get("APP_SECRET")
        if not app_secret:
            return f(*args, **kwargs)

        header = request.headers.get(SIGNATURE_HEADER, "")
        signature = header[7:] if header.startswith("sha256=") else ""
        if not signature or not validate_signature(request.get_data(), signature, app_secret):
            _logger.info("Signature verification failed!")
            return "", 403
        return f(*args, **kwargs)

    return decorated_function
