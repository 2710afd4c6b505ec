"""
Error taxonomy for credential and signature operations.

Every error carries a human-readable message that is safe to return to end
users; no error ever embeds a secret, a password or a signature.
"""

from typing import Any


class CredcoreError(Exception):
    """Base class for all toolkit errors."""

    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_envelope(self) -> dict[str, Any]:
        """
        Render the error as the canonical envelope.

        Returns:
            dict: ``{"status": "error", "message": ...}``.
        """
        return {"status": "error", "message": self.message}


class InvalidArgumentError(CredcoreError, ValueError):
    """Raised for bad lengths, non-positive limits or empty required input."""

    default_message = "Invalid argument"


class WeakPasswordError(InvalidArgumentError):
    """Raised when a password does not meet the strength threshold."""

    default_message = "Password is too weak"

    def __init__(self, assessment: Any, message: str | None = None):
        self.assessment = assessment
        super().__init__(message)


class InvalidHashFormatError(CredcoreError, ValueError):
    """Raised when a stored password hash cannot be parsed."""

    default_message = "Stored password hash is malformed"


class MalformedSignatureError(CredcoreError, ValueError):
    """Raised when a provided signature is not valid hex."""

    default_message = "Signature is not valid hex"


class SignatureMismatchError(CredcoreError):
    """Raised by request guards when a well-formed signature does not match."""

    default_message = "Signature verification failed"


class EntropySourceUnavailableError(CredcoreError):
    """Raised when the operating system's secure random source cannot be read."""

    default_message = "Secure random source unavailable"


class ConfigurationError(CredcoreError):
    """Raised when a required secret or setting is missing."""

    default_message = "Service configuration error"
