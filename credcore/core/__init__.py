"""Core configuration, logging and error taxonomy package."""

from credcore.core.config import Settings, get_settings
from credcore.core.errors import (
    ConfigurationError,
    CredcoreError,
    EntropySourceUnavailableError,
    InvalidArgumentError,
    InvalidHashFormatError,
    MalformedSignatureError,
    SignatureMismatchError,
    WeakPasswordError,
)
from credcore.core.logging import get_logger, set_correlation_id, setup_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "CredcoreError",
    "InvalidArgumentError",
    "WeakPasswordError",
    "InvalidHashFormatError",
    "MalformedSignatureError",
    "SignatureMismatchError",
    "EntropySourceUnavailableError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "set_correlation_id",
    "setup_logging",
]
