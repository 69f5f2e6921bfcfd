"""In-memory message history implementation."""
import logging
import threading
from collections import deque
from typing import Deque, List, Optional

from app.domain.entities.message import MessageRecord
from app.domain.interfaces.message_store import IMessageStore


DEFAULT_CAPACITY = 100


class InMemoryMessageStore(IMessageStore):
    """
    Bounded, newest-first message history.

    Records live only in process memory and are lost on restart. Once the
    capacity is reached every append evicts the oldest record. All access
    goes through a lock so concurrent request threads see consistent
    snapshots.
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize the store.

        Args:
            capacity: Maximum number of records kept (defaults to 100)
        """
        capacity = DEFAULT_CAPACITY if capacity is None else capacity
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._records: Deque[MessageRecord] = deque(maxlen=capacity)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, record: MessageRecord) -> None:
        """Insert at the front; a full deque drops its tail."""
        with self._lock:
            self._records.appendleft(record)
            size = len(self._records)
        self._logger.debug(f"Stored message {record.id} ({size}/{self._capacity})")

    def list(self) -> List[MessageRecord]:
        with self._lock:
            return list(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)
