"""Application layer package - flows built on the primitives."""

from credcore.application.password_service import PasswordService
from credcore.application.reset_tokens import ResetTokenIssuer
from credcore.application.webhooks import WebhookVerifier

__all__ = [
    "PasswordService",
    "ResetTokenIssuer",
    "WebhookVerifier",
]
