"""Cryptographic primitives: randomness, password hashing, signatures."""

from credcore.infrastructure.crypto.entropy import (
    OTPGenerator,
    RandomTokenGenerator,
    SecureRandomSource,
    generate_otp,
    generate_session_id,
    generate_token,
)
from credcore.infrastructure.crypto.hashing import (
    PasswordHasher,
    hash_password,
    verify_password,
)
from credcore.infrastructure.crypto.signatures import (
    SignatureService,
    constant_time_equals,
    create_signature,
    verify_signature,
)

__all__ = [
    # Randomness
    "SecureRandomSource",
    "RandomTokenGenerator",
    "OTPGenerator",
    "generate_token",
    "generate_session_id",
    "generate_otp",
    # Hashing
    "PasswordHasher",
    "hash_password",
    "verify_password",
    # Signatures
    "SignatureService",
    "constant_time_equals",
    "create_signature",
    "verify_signature",
]
