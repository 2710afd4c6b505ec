"""
Unit tests for masking and sanitizing.

Tests the SensitiveDataMasker and HtmlSanitizer domain services and the
log masking processor.
"""

import pytest

from credcore.core.errors import InvalidArgumentError
from credcore.core.logging import mask_sensitive_fields
from credcore.domain.services import HtmlSanitizer, SensitiveDataMasker


class TestSensitiveDataMasker:
    """Tests for SensitiveDataMasker."""

    def test_long_value_keeps_ends(self, masker: SensitiveDataMasker):
        """Test first and last four characters are preserved."""
        masked = masker.mask("1234567890", 4)
        assert masked == "1234****7890"

    def test_middle_matches_remaining_length(self, masker: SensitiveDataMasker):
        """Test middle run covers the hidden characters."""
        masked = masker.mask("4111111111111111")
        assert masked == "4111********1111"
        assert len(masked) == 16

    def test_short_value_fully_masked(self, masker: SensitiveDataMasker):
        """Test values no longer than 2 * visible are fully masked."""
        assert masker.mask("ab", 4) == "**"
        assert masker.mask("12345678", 4) == "********"

    @pytest.mark.parametrize("data", ["", None])
    def test_empty_gets_default_mask(self, masker: SensitiveDataMasker, data):
        """Test empty input yields eight mask characters."""
        assert masker.mask(data) == "********"

    def test_custom_visible_chars(self, masker: SensitiveDataMasker):
        """Test visible character count is configurable per call."""
        assert masker.mask("abcdefghijkl", 2) == "ab********kl"

    def test_zero_visible_chars(self, masker: SensitiveDataMasker):
        """Test zero visible characters hides everything."""
        assert masker.mask("abc", 0) == "****"
        assert masker.mask("abcdefgh", 0) == "********"

    def test_negative_visible_chars_rejected(self, masker: SensitiveDataMasker):
        """Test negative counts raise."""
        with pytest.raises(InvalidArgumentError):
            masker.mask("abcdefghij", -1)

    def test_custom_mask_char(self):
        """Test mask character is configurable."""
        assert SensitiveDataMasker(mask_char="#").mask("user@example.com") == "user########.com"

    def test_invalid_mask_char_rejected(self):
        """Test mask character must be a single character."""
        with pytest.raises(InvalidArgumentError):
            SensitiveDataMasker(mask_char="**")


class TestLogMasking:
    """Tests for the structlog masking processor."""

    def test_masks_configured_keys(self):
        """Test sensitive keys are masked case-insensitively."""
        processor = mask_sensitive_fields(["token", "signature"])
        event = processor(
            None,
            "info",
            {"event": "token_issued", "Token": "a1b2c3d4e5f6a7b8", "user_id": 42},
        )
        assert event["Token"] == "a1b2********a7b8"
        assert event["user_id"] == 42
        assert event["event"] == "token_issued"

    def test_none_values_untouched(self):
        """Test missing values are left alone."""
        processor = mask_sensitive_fields(["signature"])
        event = processor(None, "warning", {"event": "x", "signature": None})
        assert event["signature"] is None


class TestHtmlSanitizer:
    """Tests for HtmlSanitizer."""

    @pytest.fixture
    def sanitizer(self) -> HtmlSanitizer:
        """Create sanitizer instance."""
        return HtmlSanitizer()

    def test_script_tag_escaped(self, sanitizer: HtmlSanitizer):
        """Test markup is neutralised."""
        assert sanitizer.sanitize("<script>alert('x')</script>") == (
            "&lt;script&gt;alert(&#x27;x&#x27;)&lt;&#x2F;script&gt;"
        )

    def test_ampersand_escaped_once(self, sanitizer: HtmlSanitizer):
        """Test ampersands are not double escaped."""
        assert sanitizer.sanitize('a & "b"') == "a &amp; &quot;b&quot;"

    @pytest.mark.parametrize("value", [None, 42, ["<b>"]])
    def test_non_strings_unchanged(self, sanitizer: HtmlSanitizer, value):
        """Test non-string values pass through."""
        assert sanitizer.sanitize(value) is value
