"""
Domain models for the credential and signing toolkit.

These are transient value objects with no infrastructure dependencies.
Every instance is created per call and owned by the caller afterwards.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Strength(str, Enum):
    """
    Classification of a password strength score.

    STRONG: four or more criteria satisfied.
    MEDIUM: exactly three criteria satisfied.
    WEAK: fewer than three criteria satisfied.
    """

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


@dataclass(frozen=True)
class StrengthFeedback:
    """
    Per-criterion results of a password strength check.

    Attributes:
        min_length: Password has at least the minimum length.
        has_uppercase: Contains an ASCII uppercase letter.
        has_lowercase: Contains an ASCII lowercase letter.
        has_numbers: Contains a decimal digit.
        has_special_char: Contains a character from the special set.
    """

    min_length: bool
    has_uppercase: bool
    has_lowercase: bool
    has_numbers: bool
    has_special_char: bool

    @property
    def satisfied(self) -> int:
        """Number of satisfied criteria."""
        return sum(
            (
                self.min_length,
                self.has_uppercase,
                self.has_lowercase,
                self.has_numbers,
                self.has_special_char,
            )
        )


@dataclass(frozen=True)
class StrengthAssessment:
    """
    Composite result of a password strength check.

    Attributes:
        score: Count of satisfied criteria (0 to 5).
        strength: Classification derived from the score.
        is_valid: Whether the score meets the acceptance threshold.
        feedback: Per-criterion flags.
    """

    score: int
    strength: Strength
    is_valid: bool
    feedback: StrengthFeedback

    def __post_init__(self) -> None:
        """Validate score is in valid range."""
        if not 0 <= self.score <= 5:
            raise ValueError(f"Score must be between 0 and 5, got {self.score}")

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form for JSON responses."""
        return {
            "isValid": self.is_valid,
            "strength": self.strength.value,
            "score": self.score,
            "feedback": asdict(self.feedback),
        }


@dataclass(frozen=True)
class IssuedToken:
    """
    A freshly issued single-use token.

    Only ``token_hash`` is meant to be stored; ``token`` is handed to the
    user (e.g. in a reset link) and never persisted.

    Attributes:
        token: Hex-encoded random token.
        token_hash: SHA-256 hex digest of the token.
        expires_at: When the token stops being accepted.
    """

    token: str
    token_hash: str
    expires_at: datetime

    def __repr__(self) -> str:
        return (
            f"IssuedToken(token='***', token_hash={self.token_hash!r}, "
            f"expires_at={self.expires_at!r})"
        )


class ErrorEnvelope(BaseModel):
    """Canonical error body returned to end users."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: str = Field(min_length=1)


class RateLimitDescriptor(BaseModel):
    """
    Rate limit policy consumed by an external throttling middleware.

    The descriptor only carries configuration; counting requests and
    evicting windows belongs to the middleware.
    """

    model_config = ConfigDict(frozen=True)

    window_ms: int = Field(gt=0, description="Window length in milliseconds")
    max_requests: int = Field(gt=0, description="Requests allowed per window")
    message: ErrorEnvelope
    standard_headers: bool = True
    legacy_headers: bool = False

    @property
    def window_seconds(self) -> float:
        """Window length in seconds."""
        return self.window_ms / 1000

    def to_dict(self) -> dict[str, Any]:
        """
        Render with the option names throttling middlewares expect.

        Returns:
            dict: ``windowMs``, ``max``, ``message``, ``standardHeaders``,
            ``legacyHeaders``.
        """
        return {
            "windowMs": self.window_ms,
            "max": self.max_requests,
            "message": self.message.model_dump(),
            "standardHeaders": self.standard_headers,
            "legacyHeaders": self.legacy_headers,
        }
