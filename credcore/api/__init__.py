"""FastAPI integration package."""

from credcore.api.deps import (
    Passwords,
    VerifiedBody,
    get_password_service,
    get_webhook_verifier,
    require_webhook_signature,
)
from credcore.api.errors import register_error_handlers, status_code_for

__all__ = [
    "Passwords",
    "VerifiedBody",
    "get_password_service",
    "get_webhook_verifier",
    "require_webhook_signature",
    "register_error_handlers",
    "status_code_for",
]
