"""Notification message DTOs.

Framework-agnostic representation of a ``NotificationMessage`` for
consumers that forward events outside the process (outbox tables,
message brokers, logs).  DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain_foundations.domain.messages import NotificationMessage


class NotificationMessageDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_id: UUID
    event_name: str
    message: Optional[str]
    occurred_on: datetime

    @classmethod
    def from_message(cls, message: NotificationMessage) -> NotificationMessageDTO:
        if not isinstance(message, NotificationMessage):
            raise TypeError(
                f"Expected a NotificationMessage, got {type(message).__name__}."
            )
        return cls(
            event_id=message.event_id,
            event_name=message.event_name,
            message=message.message,
            occurred_on=message.occurred_on,
        )

    def payload(self) -> Dict[str, Any]:
        """JSON-safe dict of the message."""
        return self.model_dump(mode="json")
