"""In-memory domain event publisher."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Type

import structlog

from domain_foundations.config import get_settings
from domain_foundations.domain.entity import Entity
from domain_foundations.domain.messages import NotificationMessage
from domain_foundations.domain.publisher import (
    IDomainEventPublisher,
    INotificationHandler,
)
from domain_foundations.exceptions import DomainEventDispatchError

logger = structlog.get_logger(__name__)


class DomainEventPublisher(IDomainEventPublisher):
    """Simple in-process publisher.

    A message reaches the handlers subscribed for its own class and for
    every ``NotificationMessage`` base class, most specific class first.
    """

    def __init__(self, suppress_handler_errors: Optional[bool] = None) -> None:
        self._handlers: Dict[Type[NotificationMessage], List[INotificationHandler]] = {}
        if suppress_handler_errors is None:
            suppress_handler_errors = get_settings().suppress_handler_errors
        self._suppress_handler_errors = suppress_handler_errors

    def subscribe(
        self, message_class: Type[NotificationMessage], handler: INotificationHandler
    ) -> None:
        if not (
            isinstance(message_class, type)
            and issubclass(message_class, NotificationMessage)
        ):
            raise TypeError(
                f"Expected a NotificationMessage subclass, got {message_class!r}."
            )
        handlers = self._handlers.setdefault(message_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def handlers_for(
        self, message_class: Type[NotificationMessage]
    ) -> List[INotificationHandler]:
        resolved: List[INotificationHandler] = []
        for klass in message_class.__mro__:
            if issubclass(klass, NotificationMessage):
                resolved.extend(self._handlers.get(klass, []))
        return resolved

    def publish(self, message: NotificationMessage) -> None:
        if not isinstance(message, NotificationMessage):
            raise TypeError(
                f"Expected a NotificationMessage, got {type(message).__name__}."
            )
        handlers = self.handlers_for(type(message))
        if not handlers:
            logger.debug("domain_event.unhandled", event_name=message.event_name)
            return

        with structlog.contextvars.bound_contextvars(
            event_id=str(message.event_id), event_name=message.event_name
        ):
            failures = self._dispatch(message, handlers)

        logger.info(
            "domain_event.published",
            event_name=message.event_name,
            handler_count=len(handlers),
            failure_count=len(failures),
        )
        if failures:
            raise DomainEventDispatchError(failures)

    def _dispatch(
        self, message: NotificationMessage, handlers: List[INotificationHandler]
    ) -> List[Tuple[Any, BaseException]]:
        failures: List[Tuple[Any, BaseException]] = []
        for handler in handlers:
            try:
                handler.handle(message)
            except Exception as exc:
                logger.exception(
                    "domain_event.handler_failed",
                    handler=type(handler).__name__,
                    event_name=message.event_name,
                )
                if not self._suppress_handler_errors:
                    raise
                failures.append((handler, exc))
        return failures


def publish_domain_events(
    entity: Entity, publisher: IDomainEventPublisher
) -> Tuple[NotificationMessage, ...]:
    """Publish an entity's events in insertion order until none are left.

    Events recorded by handlers during the flush are published too.  A
    batch is cleared only after all of it was published, so the entity
    keeps its events if a publication raises.
    """
    published: List[NotificationMessage] = []
    while entity.has_domain_events:
        batch = entity.domain_events
        for event in batch:
            publisher.publish(event)
        entity.clear_domain_events(len(batch))
        published.extend(batch)
    events = tuple(published)
    logger.info(
        "domain_events.flushed",
        entity=type(entity).__name__,
        entity_id=entity.id,
        event_count=len(events),
    )
    return events
