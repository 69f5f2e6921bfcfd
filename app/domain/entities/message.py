"""Message domain entity."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any


class MessageType(str, Enum):
    """Message kinds the history distinguishes."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    OTHER = "other"

    @classmethod
    def from_raw(cls, raw_type: Optional[str]) -> "MessageType":
        try:
            return cls(raw_type)
        except ValueError:
            return cls.OTHER


# Media payloads are never downloaded, only labelled
PLACEHOLDERS = {
    MessageType.IMAGE: "[Image]",
    MessageType.VIDEO: "[Video]",
    MessageType.AUDIO: "[Audio]",
    MessageType.DOCUMENT: "[Document]",
}

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def format_timestamp(epoch_seconds: Any) -> str:
    """
    Render platform epoch seconds as a readable UTC timestamp.

    Falls back to the current time when the value is missing or not numeric.
    """
    try:
        moment = datetime.fromtimestamp(int(epoch_seconds), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        moment = datetime.now(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class MessageRecord:
    """Domain entity representing one received message."""

    id: Optional[str]
    sender: Optional[str]
    content: str
    message_type: MessageType
    received_at: str
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the keys the dashboard reads."""
        return {
            "id": self.id,
            "from": self.sender,
            "text": self.content,
            "type": self.message_type.value,
            "timestamp": self.received_at,
            "raw": self.raw,
        }
