"""
Single-use tokens for password reset and email verification.

The raw token goes to the user; only its SHA-256 digest is stored.
"""

import hashlib
from datetime import datetime, timedelta, timezone

from credcore.core.config import get_settings
from credcore.core.errors import InvalidArgumentError
from credcore.domain.models import IssuedToken
from credcore.infrastructure.crypto.entropy import RandomTokenGenerator
from credcore.infrastructure.crypto.signatures import constant_time_equals


class ResetTokenIssuer:
    """
    Issues and checks reset tokens.

    Example:
        issuer = ResetTokenIssuer()
        issued = issuer.issue()
        user.reset_token_hash = issued.token_hash
        ...
        issuer.matches(token_from_link, user.reset_token_hash)
    """

    def __init__(
        self,
        ttl_seconds: int | None = None,
        generator: RandomTokenGenerator | None = None,
    ):
        """
        Initialize reset token issuer.

        Args:
            ttl_seconds: Token lifetime (defaults to settings).
            generator: Random token generator.
        """
        settings = get_settings()
        self._ttl = timedelta(
            seconds=ttl_seconds if ttl_seconds is not None else settings.reset_token_ttl_seconds
        )
        if self._ttl.total_seconds() <= 0:
            raise InvalidArgumentError("ttl_seconds must be positive")
        self._generator = generator or RandomTokenGenerator.from_settings(settings)

    @staticmethod
    def digest(token: str) -> str:
        """
        Compute the storage digest of a token.

        Args:
            token: Raw token.

        Returns:
            str: SHA-256 hex digest.
        """
        if not isinstance(token, str) or not token:
            raise InvalidArgumentError("token must be a non-empty string")
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def issue(self, now: datetime | None = None) -> IssuedToken:
        """
        Issue a new token.

        Args:
            now: Issue time (defaults to current UTC time).

        Returns:
            IssuedToken: Raw token, storage digest and expiry.
        """
        now = now or datetime.now(timezone.utc)
        token = self._generator.generate_token()
        return IssuedToken(
            token=token,
            token_hash=self.digest(token),
            expires_at=now + self._ttl,
        )

    def matches(self, token: str, stored_hash: str) -> bool:
        """
        Check a presented token against a stored digest.

        Args:
            token: Token from the reset link.
            stored_hash: Digest saved at issue time.

        Returns:
            bool: True if the token hashes to the stored digest.
        """
        if not token or not stored_hash:
            return False
        return constant_time_equals(
            self.digest(token).encode("ascii"),
            stored_hash.encode("utf-8"),
        )

    @staticmethod
    def is_expired(issued: IssuedToken, now: datetime | None = None) -> bool:
        """Check if an issued token is past its expiry."""
        now = now or datetime.now(timezone.utc)
        return now >= issued.expires_at
