"""Test doubles shared by the unit tests."""

from __future__ import annotations

import random
from dataclasses import dataclass

from domain_foundations import Entity, NotificationMessage


@dataclass(frozen=True)
class DummyNotification(NotificationMessage):
    def __post_init__(self) -> None:
        super().__post_init__()
        self._set_message("Testing notification message")


@dataclass(frozen=True)
class PlainNotification(NotificationMessage):
    """Keeps the default message."""


class DummyEntity(Entity):
    def do_something_to_trigger_adding_event(self) -> DummyNotification:
        self._id = random.randint(1, 2**31 - 1)
        notification = DummyNotification()
        self._add_domain_event(notification)
        return notification

    def notify(self) -> DummyNotification:
        notification = DummyNotification()
        self._add_domain_event(notification)
        return notification

    def record(self, message: NotificationMessage) -> None:
        self._add_domain_event(message)


class RecordingHandler:
    def __init__(self, sink: list | None = None) -> None:
        self.handled = sink if sink is not None else []

    def handle(self, message) -> None:
        self.handled.append(message)


class FailingHandler:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or RuntimeError("handler exploded")

    def handle(self, message) -> None:
        raise self.error
