"""Flask application factory with dependency injection."""
import logging
import sys
from flask import Flask

from app.config.settings import Config, get_config
from app.infrastructure.service_container import ServiceContainer
from app.middleware.rate_limiter import create_rate_limiter
from app.middleware.monitoring import register_metrics_middleware
from app.middleware.error_handler import init_error_handlers
from app.api import (
    dashboard_blueprint,
    health_blueprint,
    messages_blueprint,
    settings_blueprint,
    webhook_blueprint,
)


def create_app(config_class=None, service_container=None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Missing WhatsApp configuration is reported but never fatal: the server
    starts and outbound sending stays disabled until it is provided.

    Args:
        config_class: Optional configuration class (for testing)
        service_container: Optional prebuilt container (for testing)

    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)

    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    _configure_logging(config)

    app = Flask(__name__)
    app.config.from_object(config)

    app.register_blueprint(dashboard_blueprint)
    app.register_blueprint(webhook_blueprint)
    app.register_blueprint(messages_blueprint)
    app.register_blueprint(settings_blueprint)
    app.register_blueprint(health_blueprint)

    # Validate configuration (missing values are not fatal)
    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")
        if not config.outbound_enabled():
            _logger.warning("Server starting with outbound messaging disabled")

    _initialize_middleware(app)

    app.config['service_container'] = service_container or ServiceContainer(config)

    _logger.info(f"App routes registered: {[str(rule) for rule in app.url_map.iter_rules()]}")
    return app


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
    """
    limiter = create_rate_limiter(app)
    # Meta must always reach the webhook
    limiter.exempt(webhook_blueprint)
    limiter.exempt(health_blueprint)

    register_metrics_middleware(app, limiter)

    init_error_handlers(app)
