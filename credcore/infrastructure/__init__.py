"""Infrastructure layer package."""

from credcore.infrastructure.crypto import (
    OTPGenerator,
    PasswordHasher,
    RandomTokenGenerator,
    SecureRandomSource,
    SignatureService,
    constant_time_equals,
)

__all__ = [
    "SecureRandomSource",
    "RandomTokenGenerator",
    "OTPGenerator",
    "PasswordHasher",
    "SignatureService",
    "constant_time_equals",
]
