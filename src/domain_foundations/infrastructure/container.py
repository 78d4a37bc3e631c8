"""Dependency injection registration for the domain event publisher.

Usage::

    container = add_domain_event_publisher(containers.DynamicContainer())
    publisher = get_domain_event_publisher(container)
"""

from __future__ import annotations

from dependency_injector import containers, providers

from domain_foundations.exceptions import PublisherNotRegistered
from domain_foundations.infrastructure.publisher import DomainEventPublisher

PROVIDER_NAME = "domain_event_publisher"


def add_domain_event_publisher(
    container: containers.Container,
) -> containers.Container:
    """Bind the publisher capability to a process-wide singleton.

    Returns the same container so registrations can be chained.  An
    existing binding is left untouched.
    """
    if PROVIDER_NAME not in container.providers:
        container.set_provider(PROVIDER_NAME, providers.Singleton(DomainEventPublisher))
    return container


def get_domain_event_publisher(container: containers.Container) -> DomainEventPublisher:
    provider = container.providers.get(PROVIDER_NAME)
    if provider is None:
        raise PublisherNotRegistered(
            "No domain event publisher registered; call add_domain_event_publisher()."
        )
    return provider()
