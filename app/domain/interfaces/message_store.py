"""Interface for the received message history (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List

from app.domain.entities.message import MessageRecord


class IMessageStore(ABC):
    """Interface for storing and listing recently received messages."""

    @abstractmethod
    def append(self, record: MessageRecord) -> None:
        """
        Insert a record as the newest entry.

        Args:
            record: Normalized message record
        """
        pass

    @abstractmethod
    def list(self) -> List[MessageRecord]:
        """
        Snapshot of stored records, newest first.

        Returns:
            List of message records
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass
