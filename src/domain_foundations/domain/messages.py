"""Notification messages (domain events) raised by entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

DEFAULT_MESSAGE = "Default message."


@dataclass(frozen=True, kw_only=True)
class NotificationMessage:
    """Base notification message (immutable).

    Subclasses change ``message`` by redeclaring the field default or by
    calling ``_set_message`` from ``__post_init__``.
    """

    message: Optional[str] = DEFAULT_MESSAGE
    event_id: UUID = field(default_factory=uuid4)
    occurred_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_name", self.__class__.__name__)

    def _set_message(self, message: Optional[str]) -> None:
        object.__setattr__(self, "message", message)
