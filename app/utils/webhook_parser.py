"""Utilities for parsing WhatsApp webhook payloads."""
from typing import Dict, Any, List, Iterator

from app.domain.entities.message import (
    MessageRecord,
    MessageType,
    PLACEHOLDERS,
    format_timestamp,
)
from app.domain.exceptions import MessageExtractionError, WebhookStructureError


BUSINESS_ACCOUNT_OBJECT = "whatsapp_business_account"


class WebhookParser:
    """Utility class for parsing WhatsApp webhook payloads."""

    @staticmethod
    def is_business_account(webhook_body: Any) -> bool:
        """
        Check the top-level discriminator of a webhook.

        Args:
            webhook_body: Decoded JSON body (may be any type)

        Returns:
            True if the envelope comes from a WhatsApp business account
        """
        return (
            isinstance(webhook_body, dict)
            and webhook_body.get("object") == BUSINESS_ACCOUNT_OBJECT
        )

    @staticmethod
    def iter_values(webhook_body: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
        """
        Yield the ``value`` object of every change of every entry.

        Raises:
            WebhookStructureError: If entry, changes or value is absent
        """
        entries = webhook_body.get("entry")
        if not isinstance(entries, list):
            raise WebhookStructureError("webhook has no 'entry' list")

        for entry in entries:
            changes = entry.get("changes") if isinstance(entry, dict) else None
            if not isinstance(changes, list):
                raise WebhookStructureError("entry has no 'changes' list")

            for change in changes:
                value = change.get("value") if isinstance(change, dict) else None
                if not isinstance(value, dict):
                    raise WebhookStructureError("change has no 'value' object")
                yield value

    @staticmethod
    def extract_messages(value: Dict[str, Any]) -> List[Any]:
        messages = value.get("messages")
        return messages if isinstance(messages, list) else []

    @staticmethod
    def extract_statuses(value: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Extract status updates from a change value.

        Malformed entries are dropped rather than reported.
        """
        statuses = value.get("statuses")
        if not isinstance(statuses, list):
            return []
        return [status for status in statuses if isinstance(status, dict)]

    @staticmethod
    def to_record(message: Any) -> MessageRecord:
        """
        Normalize one inbound message into a record.

        Args:
            message: A single item of ``value.messages``

        Returns:
            MessageRecord with text or a placeholder as content

        Raises:
            MessageExtractionError: If the message cannot be normalized
        """
        if not isinstance(message, dict):
            raise MessageExtractionError(f"message is not an object: {message!r}")

        raw_type = message.get("type")
        message_type = MessageType.from_raw(raw_type)

        if message_type is MessageType.TEXT:
            text = message.get("text")
            body = text.get("body") if isinstance(text, dict) else None
            if not isinstance(body, str):
                raise MessageExtractionError(
                    f"text message {message.get('id')} has no text body"
                )
            content = body
        elif message_type is MessageType.OTHER:
            content = f"[{raw_type or 'unknown'}]"
        else:
            content = PLACEHOLDERS[message_type]

        return MessageRecord(
            id=message.get("id"),
            sender=message.get("from"),
            content=content,
            message_type=message_type,
            received_at=format_timestamp(message.get("timestamp")),
            raw=message,
        )
