"""Runtime settings and structured logging setup.

Values are read with ``python-decouple`` (environment first, then a
``.env`` / ``settings.ini`` file) and validated into an immutable
``Settings`` model.
"""

from __future__ import annotations

import logging
import logging.config
import re
from functools import lru_cache

import structlog
from decouple import config
from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "INFO"
    log_json: bool = True
    suppress_handler_errors: bool = False

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        log_level=config("DOMAIN_EVENTS_LOG_LEVEL", default="INFO"),
        log_json=config("DOMAIN_EVENTS_LOG_JSON", default=True, cast=bool),
        suppress_handler_errors=config(
            "DOMAIN_EVENTS_SUPPRESS_HANDLER_ERRORS", default=False, cast=bool
        ),
    )


def reset_settings() -> None:
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Structured Logging (structlog + stdlib logging)
# ---------------------------------------------------------------------------
SENSITIVE_PATTERN = re.compile(
    r"(password|passwd|secret|token|authorization)"
    r"""([=:]\s*["']?)([^\s,}"']+)""",
    re.IGNORECASE,
)


def mask_sensitive_data(_, __, event_dict):
    """Processor that masks passwords, secrets and tokens in log values."""
    for key, value in list(event_dict.items()):
        if isinstance(value, str):
            event_dict[key] = SENSITIVE_PATTERN.sub(r"\1\2***MASKED***", value)
    return event_dict


# Shared processors used by both structlog and stdlib logging
_shared_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    mask_sensitive_data,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def build_logging_config(settings: Settings) -> dict:
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
                "foreign_pre_chain": _shared_processors,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
            },
        },
        "loggers": {
            "domain_foundations": {
                "handlers": ["console"],
                "level": settings.log_level,
                "propagate": False,
            },
        },
    }


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog through stdlib logging with the shared processors."""
    settings = settings or get_settings()
    structlog.configure(
        processors=[
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.config.dictConfig(build_logging_config(settings))
