"""Domain interfaces following Dependency Inversion Principle."""

from app.domain.interfaces.message_provider import IMessageProvider
from app.domain.interfaces.message_store import IMessageStore

__all__ = [
    "IMessageProvider",
    "IMessageStore",
]
