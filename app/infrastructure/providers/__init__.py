"""Infrastructure providers - concrete implementations."""

from app.infrastructure.providers.whatsapp_provider import WhatsAppProvider

__all__ = [
    "WhatsAppProvider",
]
