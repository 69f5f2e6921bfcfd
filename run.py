"""Application entry point: ``gunicorn -c gunicorn_config.py run:app``."""
import logging

from app import create_app
from app.config.settings import get_config

config = get_config()
app = create_app(config)


def _log_startup_banner() -> None:
    """Log configuration status without revealing secrets."""
    _logger = logging.getLogger("run")

    def status(value) -> str:
        return "Set" if value else "Missing"

    _logger.info("WhatsApp Cloud API webhook relay")
    _logger.info(f"Server running on port: {config.PORT}")
    _logger.info("Webhook endpoint: /webhook")
    _logger.info(f"Verify Token: {status(config.VERIFY_TOKEN)}")
    _logger.info(f"WhatsApp Token: {status(config.WHATSAPP_TOKEN)}")
    _logger.info(f"Phone Number ID: {status(config.PHONE_NUMBER_ID)}")
    _logger.info(f"Webhook signature check: {'on' if config.APP_SECRET else 'off'}")
    _logger.info(f"Message history capacity: {config.MESSAGE_HISTORY_LIMIT}")


_log_startup_banner()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=config.PORT, debug=config.DEBUG)
