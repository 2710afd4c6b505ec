"""
Structured logging configuration with correlation ID support.

Provides JSON-formatted logs for production and human-readable logs for
development. Sensitive fields (tokens, passwords, signatures) are masked
by a processor before any renderer sees them.
"""

import logging
import sys
import uuid
from collections.abc import Callable, Iterable
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import Processor

from credcore.core.config import get_settings

# Context variable for correlation ID per call chain
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """
    Get the current correlation ID.

    Returns:
        str: Correlation ID for the current context.
    """
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        str: The correlation ID that was set.
    """
    cid = correlation_id or str(uuid.uuid4())
    correlation_id_var.set(cid)
    return cid


def add_correlation_id(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Structlog processor to add correlation ID to log entries.

    Args:
        logger: The logger instance.
        method_name: The logging method name (info, error, etc.).
        event_dict: The log event dictionary.

    Returns:
        dict: Updated event dictionary with correlation_id.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def mask_sensitive_fields(
    fields: Iterable[str],
    mask: Callable[[str], str] | None = None,
) -> Processor:
    """
    Build a structlog processor that masks sensitive event values.

    Args:
        fields: Event keys whose values must never be logged verbatim.
        mask: Masking function; defaults to SensitiveDataMasker.mask.

    Returns:
        Processor: Processor replacing matching values with masked text.
    """
    if mask is None:
        from credcore.domain.services import SensitiveDataMasker

        mask = SensitiveDataMasker.from_settings().mask

    keys = {name.lower() for name in fields}

    def processor(
        logger: logging.Logger,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if key.lower() in keys and value is not None:
                event_dict[key] = mask(str(value))
        return event_dict

    return processor


def setup_logging() -> None:
    """
    Configure structured logging for the toolkit.

    Sets up structlog with JSON formatting for production and
    colored console output for development. Integrates with
    standard library logging for third-party packages.
    """
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    common_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_correlation_id,
        mask_sensitive_fields(settings.log_masked_fields),
    ]

    if settings.log_format == "json":
        processors: list[Processor] = [
            *common_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *common_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # passlib warns about bcrypt backend version probing
    logging.getLogger("passlib").setLevel(logging.ERROR)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Optional logger name. Defaults to caller's module name.

    Returns:
        BoundLogger: Configured structlog logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("webhook_verified", signature="3f2a...")
    """
    return structlog.get_logger(name)
