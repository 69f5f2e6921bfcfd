"""Repository implementations."""
from app.infrastructure.repositories.message_store import InMemoryMessageStore

__all__ = ["InMemoryMessageStore"]
