"""Webhook ingestion: normalizes inbound messages into the history store."""
import logging
from dataclasses import dataclass
from typing import Dict, Any

from app.domain.exceptions import MessageExtractionError
from app.domain.interfaces.message_store import IMessageStore
from app.middleware.monitoring import (
    track_ingestion_failure,
    track_message_received,
    track_status_update,
)
from app.utils.webhook_parser import WebhookParser


@dataclass
class IngestionSummary:
    """Counts gathered while processing one webhook."""

    stored: int = 0
    failed: int = 0
    statuses: int = 0


class IngestionService:
    """
    Turns a validated webhook envelope into stored message records.

    A message that fails to normalize is logged and skipped; its siblings
    are still stored. Structural faults in the envelope propagate as
    WebhookStructureError.
    """

    def __init__(self, store: IMessageStore):
        self._store = store
        self._logger = logging.getLogger(__name__)

    def process(self, webhook_body: Dict[str, Any]) -> IngestionSummary:
        """
        Store every message in the webhook and observe status updates.

        Args:
            webhook_body: Envelope whose ``object`` was already checked

        Returns:
            IngestionSummary for logging

        Raises:
            WebhookStructureError: If entry, changes or value is absent
        """
        summary = IngestionSummary()

        for value in WebhookParser.iter_values(webhook_body):
            for message in WebhookParser.extract_messages(value):
                try:
                    record = WebhookParser.to_record(message)
                except MessageExtractionError as e:
                    summary.failed += 1
                    track_ingestion_failure()
                    self._logger.warning(f"Skipping message: {e}")
                    continue

                self._store.append(record)
                summary.stored += 1
                track_message_received(record.message_type.value)
                self._logger.info(
                    f"Message received: id={record.id}, from={record.sender}, "
                    f"type={record.message_type.value}, time={record.received_at}"
                )

            for status in WebhookParser.extract_statuses(value):
                summary.statuses += 1
                self._handle_status(status)

        return summary

    def _handle_status(self, status: Dict[str, Any]) -> None:
        """Log a delivery/read receipt; receipts are never stored."""
        message_id = status.get("id", "unknown")
        status_type = status.get("status", "unknown")
        recipient_id = status.get("recipient_id", "unknown")

        track_status_update(str(status_type))
        self._logger.info(
            f"Status update: message_id={message_id}, status={status_type}, "
            f"recipient={recipient_id}"
        )

        if status_type == "failed":
            errors = status.get("errors", [])
            self._logger.error(f"Message {message_id} failed: {errors}")
