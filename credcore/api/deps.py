"""
FastAPI dependencies for routes that consume the toolkit.

Provides a webhook signature guard and shared service instances for
route handlers.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from credcore.application.password_service import PasswordService
from credcore.application.webhooks import WebhookVerifier
from credcore.core.config import get_settings
from credcore.core.errors import SignatureMismatchError


@lru_cache
def get_webhook_verifier() -> WebhookVerifier:
    """
    Get the shared webhook verifier.

    Returns:
        WebhookVerifier: Verifier using the configured secret.
    """
    return WebhookVerifier()


@lru_cache
def get_password_service() -> PasswordService:
    """
    Get the shared password service.

    Returns:
        PasswordService: Service using the configured hashing policy.
    """
    return PasswordService()


async def require_webhook_signature(
    request: Request,
    verifier: Annotated[WebhookVerifier, Depends(get_webhook_verifier)],
) -> bytes:
    """
    Verify the raw request body against the signature header.

    Args:
        request: The incoming HTTP request.
        verifier: Webhook verifier.

    Returns:
        bytes: The verified raw body.

    Raises:
        MalformedSignatureError: If the header is missing or not hex.
        SignatureMismatchError: If the signature does not match.
    """
    header = get_settings().webhook_signature_header
    raw_body = await request.body()

    if not verifier.verify(raw_body, request.headers.get(header)):
        raise SignatureMismatchError("Webhook signature verification failed")

    return raw_body


# Type aliases for cleaner route signatures
VerifiedBody = Annotated[bytes, Depends(require_webhook_signature)]
Passwords = Annotated[PasswordService, Depends(get_password_service)]
