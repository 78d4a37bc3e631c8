"""Domain-modeling building blocks: entities that record domain events."""

from domain_foundations.domain import (
    DEFAULT_MESSAGE,
    Entity,
    IDomainEventPublisher,
    INotificationHandler,
    NotificationMessage,
)
from domain_foundations.dtos import NotificationMessageDTO
from domain_foundations.exceptions import (
    DomainEventDispatchError,
    DomainFoundationsError,
    PublisherNotRegistered,
)
from domain_foundations.infrastructure import (
    DomainEventPublisher,
    add_domain_event_publisher,
    get_domain_event_publisher,
    publish_domain_events,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_MESSAGE",
    "DomainEventDispatchError",
    "DomainEventPublisher",
    "DomainFoundationsError",
    "Entity",
    "IDomainEventPublisher",
    "INotificationHandler",
    "NotificationMessage",
    "NotificationMessageDTO",
    "PublisherNotRegistered",
    "add_domain_event_publisher",
    "get_domain_event_publisher",
    "publish_domain_events",
]
