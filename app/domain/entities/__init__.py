"""Domain entities - core business objects."""
from app.domain.entities.message import MessageRecord, MessageType

__all__ = [
    "MessageRecord",
    "MessageType",
]
