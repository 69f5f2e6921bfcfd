"""Monitoring and metrics middleware using Prometheus."""
import logging
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST

logger = logging.getLogger(__name__)

# Prometheus metrics
messages_received_total = Counter(
    'whatsapp_messages_received_total',
    'Total number of WhatsApp messages stored from webhooks',
    ['type']
)

message_ingestion_failures_total = Counter(
    'whatsapp_message_ingestion_failures_total',
    'Total number of webhook messages that could not be normalized'
)

status_updates_total = Counter(
    'whatsapp_status_updates_total',
    'Total number of message status updates observed',
    ['status']
)

outbound_messages_total = Counter(
    'whatsapp_outbound_messages_total',
    'Total number of outbound send attempts',
    ['status']
)


def register_metrics_middleware(app, limiter=None) -> None:
    """
    Register the Prometheus metrics endpoint.

    Args:
        app: Flask application instance
        limiter: Optional limiter to exempt the endpoint from
    """
    if not app.config.get("ENABLE_METRICS"):
        return

    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    if limiter is not None:
        limiter.exempt(metrics)

    logger.info("Prometheus metrics enabled at /metrics")


def track_message_received(message_type: str) -> None:
    messages_received_total.labels(type=message_type).inc()


def track_ingestion_failure() -> None:
    message_ingestion_failures_total.inc()


KNOWN_STATUSES = frozenset({"sent", "delivered", "read", "failed"})


def track_status_update(status: str) -> None:
    """Count a receipt; statuses outside the known set share the "other" label."""
    label = status if status in KNOWN_STATUSES else "other"
    status_updates_total.labels(status=label).inc()


def track_outbound_message(success: bool) -> None:
    """
    Track outbound send metrics.

    Args:
        success: Whether the Graph API accepted the message
    """
    status = "success" if success else "error"
    outbound_messages_total.labels(status=status).inc()
