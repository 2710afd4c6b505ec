"""Credential and signing utilities for authentication and webhook flows."""

from credcore.core.errors import (
    CredcoreError,
    EntropySourceUnavailableError,
    InvalidArgumentError,
    InvalidHashFormatError,
    MalformedSignatureError,
)
from credcore.domain.services import (
    PasswordStrengthScorer,
    RateLimitDescriptorBuilder,
    SensitiveDataMasker,
)
from credcore.infrastructure.crypto import (
    OTPGenerator,
    PasswordHasher,
    RandomTokenGenerator,
    SignatureService,
)

__version__ = "1.0.0"

__all__ = [
    "CredcoreError",
    "EntropySourceUnavailableError",
    "InvalidArgumentError",
    "InvalidHashFormatError",
    "MalformedSignatureError",
    "OTPGenerator",
    "PasswordHasher",
    "PasswordStrengthScorer",
    "RandomTokenGenerator",
    "RateLimitDescriptorBuilder",
    "SensitiveDataMasker",
    "SignatureService",
]
