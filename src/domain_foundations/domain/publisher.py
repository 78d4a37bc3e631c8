"""Publisher interfaces for in-process domain event dispatch."""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from domain_foundations.domain.messages import NotificationMessage

M = TypeVar("M", bound=NotificationMessage, contravariant=True)


class INotificationHandler(Protocol, Generic[M]):
    """Handler interface for notification messages.

    A handler subscribed for a message class also receives every message
    whose class derives from it.
    """

    def handle(self, message: M) -> None: ...


class IDomainEventPublisher(Protocol):
    """Delivers notification messages to their subscribed handlers."""

    def publish(self, message: NotificationMessage) -> None: ...

    def subscribe(
        self, message_class: Type[M], handler: INotificationHandler[M]
    ) -> None: ...
