"""
Domain services for password strength, masking, sanitizing and rate limit
policies.

These services contain pure logic with no cryptographic or infrastructure
dependencies. They are safe to call on every keystroke or log line.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import ValidationError

from credcore.core.config import Settings, get_settings
from credcore.core.errors import InvalidArgumentError
from credcore.domain.models import (
    ErrorEnvelope,
    RateLimitDescriptor,
    Strength,
    StrengthAssessment,
    StrengthFeedback,
)


@dataclass
class PasswordStrengthScorer:
    """
    Scores a password against five independent criteria.

    Criteria: minimum length, an uppercase letter, a lowercase letter,
    a digit and a special character. The score is the number of
    satisfied criteria.

    Example:
        >>> scorer = PasswordStrengthScorer()
        >>> scorer.assess("Abcdef1!").strength
        <Strength.STRONG: 'strong'>
        >>> scorer.assess("").score
        0
    """

    UPPERCASE: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z]")
    LOWERCASE: ClassVar[re.Pattern[str]] = re.compile(r"[a-z]")
    DIGIT: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]")
    SPECIAL: ClassVar[re.Pattern[str]] = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

    STRONG_THRESHOLD: ClassVar[int] = 4
    MEDIUM_THRESHOLD: ClassVar[int] = 3
    VALID_THRESHOLD: ClassVar[int] = 3

    min_length: int = 8

    def assess(self, password: str | None) -> StrengthAssessment:
        """
        Evaluate a password.

        Args:
            password: Candidate password. None is treated as empty.

        Returns:
            StrengthAssessment: Score, classification and per-criterion flags.
        """
        password = password or ""

        feedback = StrengthFeedback(
            min_length=len(password) >= self.min_length,
            has_uppercase=bool(self.UPPERCASE.search(password)),
            has_lowercase=bool(self.LOWERCASE.search(password)),
            has_numbers=bool(self.DIGIT.search(password)),
            has_special_char=bool(self.SPECIAL.search(password)),
        )
        score = feedback.satisfied

        return StrengthAssessment(
            score=score,
            strength=self.classify(score),
            is_valid=score >= self.VALID_THRESHOLD,
            feedback=feedback,
        )

    def classify(self, score: int) -> Strength:
        """Map a score to its strength classification."""
        if score >= self.STRONG_THRESHOLD:
            return Strength.STRONG
        if score == self.MEDIUM_THRESHOLD:
            return Strength.MEDIUM
        return Strength.WEAK

    def is_valid(self, password: str | None) -> bool:
        """Check if a password meets the acceptance threshold."""
        return self.assess(password).is_valid


@dataclass
class SensitiveDataMasker:
    """
    Redacts the middle of a string for display and logging.

    Masking is one-way display redaction, never a reversible encoding.

    Example:
        >>> SensitiveDataMasker().mask("1234567890")
        '1234****7890'
    """

    EMPTY_MASK_LENGTH: ClassVar[int] = 8
    MIN_MIDDLE_LENGTH: ClassVar[int] = 4

    mask_char: str = "*"
    visible_chars: int = 4

    def __post_init__(self) -> None:
        if len(self.mask_char) != 1:
            raise InvalidArgumentError("mask_char must be a single character")
        self._check_visible(self.visible_chars)

    def mask(self, data: str | None, visible_chars: int | None = None) -> str:
        """
        Mask the interior of a value.

        Args:
            data: Value to redact. Empty or None yields a default-length mask.
            visible_chars: Characters kept at each end (defaults to the
                masker's setting).

        Returns:
            str: Redacted value.

        Raises:
            InvalidArgumentError: If visible_chars is negative.
        """
        visible = self.visible_chars if visible_chars is None else visible_chars
        self._check_visible(visible)

        if not data:
            return self.mask_char * self.EMPTY_MASK_LENGTH

        length = len(data)
        if length <= visible * 2:
            return self.mask_char * length

        start = data[:visible]
        end = data[length - visible:]
        middle = self.mask_char * max(self.MIN_MIDDLE_LENGTH, length - visible * 2)
        return f"{start}{middle}{end}"

    @staticmethod
    def _check_visible(visible_chars: int) -> None:
        if isinstance(visible_chars, bool) or not isinstance(visible_chars, int):
            raise InvalidArgumentError("visible_chars must be an integer")
        if visible_chars < 0:
            raise InvalidArgumentError("visible_chars must not be negative")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SensitiveDataMasker":
        """Create a masker using the configured visible character count."""
        settings = settings or get_settings()
        return cls(visible_chars=settings.mask_visible_chars)


@dataclass
class HtmlSanitizer:
    """
    Escapes HTML-significant characters in user supplied strings.

    Example:
        >>> HtmlSanitizer().sanitize("<b>")
        '&lt;b&gt;'
    """

    # Ampersand must be replaced first
    REPLACEMENTS: ClassVar[list[tuple[str, str]]] = [
        ("&", "&amp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ('"', "&quot;"),
        ("'", "&#x27;"),
        ("/", "&#x2F;"),
    ]

    def sanitize(self, value: Any) -> Any:
        """
        Escape a string; non-string values are returned unchanged.

        Args:
            value: Input value.

        Returns:
            The escaped string, or the original value.
        """
        if not isinstance(value, str):
            return value

        for char, entity in self.REPLACEMENTS:
            value = value.replace(char, entity)
        return value


@dataclass
class RateLimitDescriptorBuilder:
    """
    Validates rate limit options into a canonical descriptor.

    Performs no enforcement. Accepts both camelCase option names
    (``windowMs``, ``max``, ``standardHeaders``, ``legacyHeaders``) and
    their snake_case equivalents.

    Example:
        >>> builder = RateLimitDescriptorBuilder()
        >>> builder.build({"max": 50}).to_dict()["max"]
        50
    """

    OPTION_ALIASES: ClassVar[dict[str, str]] = {
        "windowMs": "window_ms",
        "window_ms": "window_ms",
        "max": "max_requests",
        "max_requests": "max_requests",
        "message": "message",
        "standardHeaders": "standard_headers",
        "standard_headers": "standard_headers",
        "legacyHeaders": "legacy_headers",
        "legacy_headers": "legacy_headers",
    }

    PRESETS: ClassVar[dict[str, dict[str, Any]]] = {
        "api": {
            "window_ms": 60 * 1000,
            "max_requests": 10000,
            "message": "Too many requests from this IP, please try again later.",
        },
        "products": {
            "window_ms": 60 * 1000,
            "max_requests": 5000,
            "message": "Too many product requests, please slow down.",
        },
        "admin": {
            "window_ms": 15 * 60 * 1000,
            "max_requests": 50,
            "message": "Too many admin requests from this IP, please try again later.",
        },
    }

    default_window_ms: int = 15 * 60 * 1000
    default_max_requests: int = 100
    default_message: str = "Too many requests from this IP"
    default_standard_headers: bool = True
    default_legacy_headers: bool = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
    ) -> "RateLimitDescriptorBuilder":
        """Create a builder whose defaults come from settings."""
        settings = settings or get_settings()
        return cls(
            default_window_ms=settings.rate_limit_window_ms,
            default_max_requests=settings.rate_limit_max_requests,
            default_message=settings.rate_limit_message,
        )

    def build(
        self,
        options: Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> RateLimitDescriptor:
        """
        Apply defaults and validate options.

        Args:
            options: Partial configuration, camelCase or snake_case keys.
            **overrides: Additional options taking precedence over ``options``.

        Returns:
            RateLimitDescriptor: Validated descriptor.

        Raises:
            InvalidArgumentError: On unknown keys, non-positive window or
                max, or wrongly typed values.
        """
        values: dict[str, Any] = {
            "window_ms": self.default_window_ms,
            "max_requests": self.default_max_requests,
            "message": self.default_message,
            "standard_headers": self.default_standard_headers,
            "legacy_headers": self.default_legacy_headers,
        }
        values.update(self._normalize({**(options or {}), **overrides}))

        self._check_positive_int("windowMs", values["window_ms"])
        self._check_positive_int("max", values["max_requests"])

        message = values["message"]
        if not isinstance(message, str) or not message:
            raise InvalidArgumentError("message must be a non-empty string")

        for key in ("standard_headers", "legacy_headers"):
            if not isinstance(values[key], bool):
                raise InvalidArgumentError(f"{key} must be a boolean")

        try:
            return RateLimitDescriptor(
                window_ms=values["window_ms"],
                max_requests=values["max_requests"],
                message=ErrorEnvelope(message=message),
                standard_headers=values["standard_headers"],
                legacy_headers=values["legacy_headers"],
            )
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid rate limit options: {e.errors()[0]['msg']}") from e

    def preset(self, name: str, **overrides: Any) -> RateLimitDescriptor:
        """
        Build one of the named policies.

        Args:
            name: ``api``, ``products`` or ``admin``.
            **overrides: Options replacing preset values.

        Returns:
            RateLimitDescriptor: Validated descriptor.

        Raises:
            InvalidArgumentError: If the preset is unknown.
        """
        preset = self.PRESETS.get(name)
        if preset is None:
            raise InvalidArgumentError(f"Unknown rate limit preset: {name}")
        return self.build(preset, **overrides)

    def _normalize(self, options: Mapping[str, Any]) -> dict[str, Any]:
        normalized: dict[str, Any] = {}
        for key, value in options.items():
            field_name = self.OPTION_ALIASES.get(key)
            if field_name is None:
                raise InvalidArgumentError(f"Unknown rate limit option: {key}")
            normalized[field_name] = value
        return normalized

    @staticmethod
    def _check_positive_int(name: str, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an integer")
        if value <= 0:
            raise InvalidArgumentError(f"{name} must be positive")
