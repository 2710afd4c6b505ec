"""Domain layer package - value types and pure services."""

from credcore.domain.models import (
    ErrorEnvelope,
    IssuedToken,
    RateLimitDescriptor,
    Strength,
    StrengthAssessment,
    StrengthFeedback,
)
from credcore.domain.services import (
    HtmlSanitizer,
    PasswordStrengthScorer,
    RateLimitDescriptorBuilder,
    SensitiveDataMasker,
)

__all__ = [
    # Models
    "ErrorEnvelope",
    "IssuedToken",
    "RateLimitDescriptor",
    "Strength",
    "StrengthAssessment",
    "StrengthFeedback",
    # Services
    "HtmlSanitizer",
    "PasswordStrengthScorer",
    "RateLimitDescriptorBuilder",
    "SensitiveDataMasker",
]
