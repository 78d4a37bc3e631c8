import logging

import pytest
import structlog

from domain_foundations.config import reset_settings


@pytest.fixture(autouse=True)
def _stdlib_structlog():
    """Route structlog through stdlib logging so ``caplog`` sees every event."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from DOMAIN_EVENTS_* values in the environment."""
    for name in (
        "DOMAIN_EVENTS_LOG_LEVEL",
        "DOMAIN_EVENTS_LOG_JSON",
        "DOMAIN_EVENTS_SUPPRESS_HANDLER_ERRORS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="domain_foundations")
    return caplog
