from domain_foundations.infrastructure.container import (
    add_domain_event_publisher,
    get_domain_event_publisher,
)
from domain_foundations.infrastructure.publisher import (
    DomainEventPublisher,
    publish_domain_events,
)

__all__ = [
    "DomainEventPublisher",
    "add_domain_event_publisher",
    "get_domain_event_publisher",
    "publish_domain_events",
]
