"""API endpoints module.

This module contains all HTTP API endpoints organized by domain.
"""

from app.api.webhook import webhook_blueprint
from app.api.messages import messages_blueprint
from app.api.settings import settings_blueprint
from app.api.health import health_blueprint
from app.api.dashboard import dashboard_blueprint

__all__ = [
    "webhook_blueprint",
    "messages_blueprint",
    "settings_blueprint",
    "health_blueprint",
    "dashboard_blueprint",
]
