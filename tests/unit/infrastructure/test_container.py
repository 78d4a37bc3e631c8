"""Unit tests for the publisher DI registration helper."""

from __future__ import annotations

import pytest
from dependency_injector import containers, providers

from domain_foundations import (
    DomainEventPublisher,
    PublisherNotRegistered,
    add_domain_event_publisher,
    get_domain_event_publisher,
)
from domain_foundations.infrastructure.container import PROVIDER_NAME

pytestmark = pytest.mark.unit


def test_registration_returns_same_container():
    container = containers.DynamicContainer()

    assert add_domain_event_publisher(container) is container


def test_registration_binds_exactly_one_singleton():
    container = add_domain_event_publisher(containers.DynamicContainer())

    singletons = [
        p for p in container.providers.values() if isinstance(p, providers.Singleton)
    ]
    assert singletons == [container.providers[PROVIDER_NAME]]
    first = get_domain_event_publisher(container)
    second = get_domain_event_publisher(container)

    assert isinstance(first, DomainEventPublisher)
    assert first is second
    assert container.domain_event_publisher() is first


def test_repeated_registration_keeps_existing_binding():
    container = add_domain_event_publisher(containers.DynamicContainer())
    provider = container.providers[PROVIDER_NAME]
    publisher = get_domain_event_publisher(container)

    add_domain_event_publisher(container)

    assert container.providers[PROVIDER_NAME] is provider
    assert get_domain_event_publisher(container) is publisher


def test_separate_containers_get_separate_singletons():
    first = add_domain_event_publisher(containers.DynamicContainer())
    second = add_domain_event_publisher(containers.DynamicContainer())

    assert get_domain_event_publisher(first) is not get_domain_event_publisher(second)


def test_resolving_without_registration_raises():
    with pytest.raises(PublisherNotRegistered):
        get_domain_event_publisher(containers.DynamicContainer())

    with pytest.raises(LookupError):
        get_domain_event_publisher(containers.DynamicContainer())
