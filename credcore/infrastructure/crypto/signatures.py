"""
HMAC-SHA256 payload signatures with constant-time verification.

This is the authenticity primitive for payment webhooks: the payload is
the raw request body, the secret is the shared webhook key and the
signature is the header value.
"""

import hashlib
import hmac
import re
from dataclasses import dataclass

from credcore.core.errors import InvalidArgumentError, MalformedSignatureError

HEX_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2})*")


def _to_bytes(name: str, value: bytes | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgumentError(f"{name} must be bytes or str")


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings in time independent of where they differ.

    Args:
        a: First value.
        b: Second value.

    Returns:
        bool: True if the values are equal.
    """
    return hmac.compare_digest(a, b)


@dataclass
class SignatureService:
    """
    Computes and verifies keyed payload signatures.

    Example:
        >>> service = SignatureService()
        >>> sig = service.sign(b'{"event":"paid"}', b"whsec")
        >>> service.verify(b'{"event":"paid"}', sig, b"whsec")
        True
    """

    digestmod: str = "sha256"

    def sign(self, payload: bytes | str, secret: bytes | str) -> str:
        """
        Compute the HMAC of a payload.

        Args:
            payload: Message bytes; str is encoded as UTF-8.
            secret: Shared key; str is encoded as UTF-8.

        Returns:
            str: Lowercase hex digest.

        Raises:
            InvalidArgumentError: If the secret is empty or inputs have
                the wrong type.
        """
        return self._digest(payload, secret).hex()

    def verify(
        self,
        payload: bytes | str,
        signature: str,
        secret: bytes | str,
    ) -> bool:
        """
        Verify a hex signature against a payload.

        A well-formed signature that does not match, including one of
        the wrong length, returns False.

        Args:
            payload: Message bytes; str is encoded as UTF-8.
            signature: Hex-encoded signature to check.
            secret: Shared key.

        Returns:
            bool: True only if the signature matches.

        Raises:
            MalformedSignatureError: If the signature is not valid hex.
        """
        if not isinstance(signature, str) or not HEX_PATTERN.fullmatch(signature):
            raise MalformedSignatureError()

        expected = self._digest(payload, secret)
        provided = bytes.fromhex(signature)
        return constant_time_equals(provided, expected)

    def _digest(self, payload: bytes | str, secret: bytes | str) -> bytes:
        key = _to_bytes("secret", secret)
        if not key:
            raise InvalidArgumentError("secret must not be empty")
        message = _to_bytes("payload", payload)
        return hmac.new(key, message, getattr(hashlib, self.digestmod)).digest()


_signature_service = SignatureService()


def create_signature(payload: bytes | str, secret: bytes | str) -> str:
    """Compute the HMAC-SHA256 hex signature of a payload."""
    return _signature_service.sign(payload, secret)


def verify_signature(
    payload: bytes | str,
    signature: str,
    secret: bytes | str,
) -> bool:
    """Verify an HMAC-SHA256 hex signature in constant time."""
    return _signature_service.verify(payload, signature, secret)
