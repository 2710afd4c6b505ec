"""
Secure random tokens and one-time codes.

All randomness is drawn from the operating system's CSPRNG through the
``secrets`` module. If that source cannot be read the call fails with
EntropySourceUnavailableError; there is no fallback to ``random``.
"""

import secrets
from dataclasses import dataclass, field

from credcore.core.config import Settings, get_settings
from credcore.core.errors import EntropySourceUnavailableError, InvalidArgumentError
from credcore.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TOKEN_BYTES = 32
DEFAULT_OTP_LENGTH = 6


def _require_positive_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive")


class SecureRandomSource:
    """
    Thin wrapper over the OS-backed ``secrets`` module.

    Converts OS-level failures into EntropySourceUnavailableError so
    callers never see a partially generated value.
    """

    def token_bytes(self, n: int) -> bytes:
        """
        Read ``n`` random bytes.

        Raises:
            EntropySourceUnavailableError: If the OS source fails.
        """
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as e:
            logger.error("entropy_source_unavailable", error=type(e).__name__)
            raise EntropySourceUnavailableError() from e

    def randbelow(self, upper: int) -> int:
        """
        Draw a uniform integer in ``[0, upper)``.

        Raises:
            EntropySourceUnavailableError: If the OS source fails.
        """
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as e:
            logger.error("entropy_source_unavailable", error=type(e).__name__)
            raise EntropySourceUnavailableError() from e


@dataclass
class RandomTokenGenerator:
    """
    Generates hex-encoded secure random tokens.

    Used for password reset tokens, email verification tokens and
    session identifiers.

    Example:
        >>> token = RandomTokenGenerator().generate_token(16)
        >>> len(token)
        32
    """

    default_bytes: int = DEFAULT_TOKEN_BYTES
    source: SecureRandomSource = field(default_factory=SecureRandomSource)

    def generate_token(self, byte_length: int | None = None) -> str:
        """
        Generate a random token.

        Args:
            byte_length: Number of random bytes (default 32).

        Returns:
            str: ``2 * byte_length`` lowercase hex characters.

        Raises:
            InvalidArgumentError: If byte_length is not a positive integer.
            EntropySourceUnavailableError: If the OS source fails.
        """
        if byte_length is None:
            byte_length = self.default_bytes
        _require_positive_int("byte_length", byte_length)
        return self.source.token_bytes(byte_length).hex()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RandomTokenGenerator":
        """Create a generator using the configured token size."""
        settings = settings or get_settings()
        return cls(default_bytes=settings.token_bytes)

    def generate_session_id(self) -> str:
        """Generate a 32-byte session identifier."""
        return self.generate_token(DEFAULT_TOKEN_BYTES)


@dataclass
class OTPGenerator:
    """
    Generates numeric one-time codes.

    Each digit is an independent ``randbelow(10)`` draw, so no position
    is biased.

    Example:
        >>> code = OTPGenerator().generate()
        >>> len(code), code.isdigit()
        (6, True)
    """

    DIGITS = "0123456789"

    default_length: int = DEFAULT_OTP_LENGTH
    source: SecureRandomSource = field(default_factory=SecureRandomSource)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "OTPGenerator":
        """Create a generator using the configured code length."""
        settings = settings or get_settings()
        return cls(default_length=settings.otp_length)

    def generate(self, length: int | None = None) -> str:
        """
        Generate a one-time code.

        Args:
            length: Number of digits (default 6).

        Returns:
            str: Exactly ``length`` decimal digits.

        Raises:
            InvalidArgumentError: If length is not a positive integer.
            EntropySourceUnavailableError: If the OS source fails.
        """
        if length is None:
            length = self.default_length
        _require_positive_int("length", length)
        return "".join(
            self.DIGITS[self.source.randbelow(len(self.DIGITS))]
            for _ in range(length)
        )


_token_generator = RandomTokenGenerator()
_otp_generator = OTPGenerator()


def generate_token(byte_length: int = DEFAULT_TOKEN_BYTES) -> str:
    """Generate a hex token of ``byte_length`` random bytes."""
    return _token_generator.generate_token(byte_length)


def generate_session_id() -> str:
    """Generate a 32-byte hex session identifier."""
    return _token_generator.generate_session_id()


def generate_otp(length: int = DEFAULT_OTP_LENGTH) -> str:
    """Generate a numeric one-time code."""
    return _otp_generator.generate(length)
