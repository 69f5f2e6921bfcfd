"""Service container for dependency injection (IoC Container Pattern)."""
import logging
import threading
from typing import Optional

from app.config.settings import Config
from app.domain.interfaces.message_provider import IMessageProvider
from app.domain.interfaces.message_store import IMessageStore
from app.infrastructure.providers.whatsapp_provider import WhatsAppProvider
from app.infrastructure.repositories.message_store import InMemoryMessageStore
from app.services.ingestion_service import IngestionService


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    One container is created per Flask application and stored in
    ``app.config['service_container']``, so each app owns its own message
    history. Services are created lazily on first use; creation is serialized
    so concurrent first requests share the same store.
    """

    def __init__(
        self,
        config: type[Config] = Config,
        message_store: Optional[IMessageStore] = None,
        message_provider: Optional[IMessageProvider] = None,
    ):
        """
        Initialize service container.

        Args:
            config: Configuration class to read settings from
            message_store: Optional store override (for testing)
            message_provider: Optional provider override (for testing)
        """
        self._logger = logging.getLogger(__name__)
        self._config = config
        self._message_store = message_store
        self._message_provider = message_provider
        self._ingestion_service: Optional[IngestionService] = None
        self._lock = threading.RLock()

    def get_message_store(self) -> IMessageStore:
        """Get or create the message history store."""
        with self._lock:
            if self._message_store is None:
                capacity = self._config.MESSAGE_HISTORY_LIMIT
                self._message_store = InMemoryMessageStore(capacity=capacity)
                self._logger.info(f"InMemoryMessageStore created with capacity {capacity}")
            return self._message_store

    def get_message_provider(self) -> IMessageProvider:
        """Get or create message provider instance."""
        with self._lock:
            if self._message_provider is None:
                self._message_provider = WhatsAppProvider(
                    access_token=self._config.WHATSAPP_TOKEN,
                    phone_number_id=self._config.PHONE_NUMBER_ID,
                    version=self._config.VERSION,
                    timeout=self._config.WHATSAPP_API_TIMEOUT,
                )
                self._logger.info("MessageProvider created: whatsapp")
            return self._message_provider

    def get_ingestion_service(self) -> IngestionService:
        """Get or create the webhook ingestion service."""
        with self._lock:
            if self._ingestion_service is None:
                self._ingestion_service = IngestionService(self.get_message_store())
            return self._ingestion_service
