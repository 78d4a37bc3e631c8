from domain_foundations.domain.entity import Entity
from domain_foundations.domain.messages import DEFAULT_MESSAGE, NotificationMessage
from domain_foundations.domain.publisher import (
    IDomainEventPublisher,
    INotificationHandler,
)

__all__ = [
    "DEFAULT_MESSAGE",
    "Entity",
    "IDomainEventPublisher",
    "INotificationHandler",
    "NotificationMessage",
]
