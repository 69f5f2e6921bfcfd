"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def create_rate_limiter(app) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    The platform's webhook endpoints are exempted by the webhook blueprint;
    the limits protect the local read and send API.

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    enabled = app.config.get("RATELIMIT_ENABLED", True)
    storage_uri = app.config.get("RATELIMIT_STORAGE_URL") or "memory://"

    try:
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=["1000 per hour", "100 per minute"],
            storage_uri=storage_uri,
            strategy="fixed-window",
            headers_enabled=True,
            enabled=enabled
        )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter with {storage_uri}: {e}, using memory storage")
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=["1000 per hour", "100 per minute"],
            storage_uri="memory://",
            enabled=enabled
        )
