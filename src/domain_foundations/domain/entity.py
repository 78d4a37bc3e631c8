"""Entity base class that records domain events in memory."""

from __future__ import annotations

from typing import List, Optional, Tuple

import structlog

from domain_foundations.domain.messages import NotificationMessage

logger = structlog.get_logger(__name__)


class Entity:
    """Base class for domain entities; meant to be subclassed.

    Business methods of a subclass record events with
    ``_add_domain_event``; callers only ever see an immutable snapshot
    through ``domain_events``.  Not thread-safe: one instance belongs to
    one unit of work.
    """

    def __init__(self, id: int = 0) -> None:  # noqa: A002
        self._id = id
        self._domain_events: List[NotificationMessage] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def domain_events(self) -> Tuple[NotificationMessage, ...]:
        return tuple(self._domain_events)

    @property
    def has_domain_events(self) -> bool:
        return bool(self._domain_events)

    def _add_domain_event(self, message: NotificationMessage) -> None:
        if not isinstance(message, NotificationMessage):
            raise TypeError(
                f"Expected a NotificationMessage, got {type(message).__name__}."
            )
        self._domain_events.append(message)
        logger.debug(
            "domain_event.recorded",
            entity=type(self).__name__,
            entity_id=self._id,
            event_name=message.event_name,
            event_count=len(self._domain_events),
        )

    def clear_domain_events(self, count: Optional[int] = None) -> None:
        """Drop the oldest ``count`` events, or all of them when omitted."""
        if count is None:
            self._domain_events.clear()
        else:
            del self._domain_events[:count]

    def pull_domain_events(self) -> Tuple[NotificationMessage, ...]:
        """Return the recorded events and clear them."""
        events = tuple(self._domain_events)
        self._domain_events.clear()
        return events

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, "
            f"domain_events={len(self._domain_events)})"
        )
