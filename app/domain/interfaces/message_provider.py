"""Interface for outbound message providers (Strategy Pattern)."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class OutboundResult:
    """Outcome of an outbound send."""

    status: str  # "success" or "error"
    message_id: Optional[str] = None
    response: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None
    http_status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


class IMessageProvider(ABC):
    """
    Interface for message providers following Strategy Pattern.

    Implementations can be swapped without changing the relay endpoint.
    """

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the credentials needed to send are present."""
        pass

    @abstractmethod
    def send_text_message(self, recipient: str, message: str) -> OutboundResult:
        """
        Send a text message to a recipient.

        Args:
            recipient: Recipient identifier (phone number digits)
            message: Message text content

        Returns:
            OutboundResult describing success or the upstream failure

        Raises:
            ConfigurationError: If credentials are missing
        """
        pass
