"""Library exceptions.

Invalid arguments (e.g. passing something that is not a
``NotificationMessage``) raise the builtin ``TypeError`` instead.
"""

from __future__ import annotations

from typing import Any, List, Tuple


class DomainFoundationsError(Exception):
    """Base class for errors raised by this package."""


class PublisherNotRegistered(DomainFoundationsError, LookupError):
    """No domain event publisher is bound in the container."""


class DomainEventDispatchError(DomainFoundationsError):
    """One or more handlers failed while errors were being suppressed."""

    def __init__(self, failures: List[Tuple[Any, BaseException]]) -> None:
        self.failures = failures
        names = ", ".join(type(handler).__name__ for handler, _ in failures)
        super().__init__(f"{len(failures)} handler(s) failed: {names}")
