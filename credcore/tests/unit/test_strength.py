"""
Unit tests for password strength scoring.

Tests the PasswordStrengthScorer domain service.
"""

import pytest

from credcore.domain.models import Strength
from credcore.domain.services import PasswordStrengthScorer


class TestPasswordStrengthScorer:
    """Tests for PasswordStrengthScorer."""

    @pytest.fixture
    def scorer(self) -> PasswordStrengthScorer:
        """Create scorer instance."""
        return PasswordStrengthScorer()

    def test_empty_is_weak(self, scorer: PasswordStrengthScorer):
        """Test empty password scores zero."""
        result = scorer.assess("")
        assert result.score == 0
        assert result.strength == Strength.WEAK
        assert result.is_valid is False

    def test_none_treated_as_empty(self, scorer: PasswordStrengthScorer):
        """Test None scores like an empty password."""
        assert scorer.assess(None).score == 0

    def test_all_criteria_is_strong(self, scorer: PasswordStrengthScorer):
        """Test password meeting every criterion."""
        result = scorer.assess("Abcdef1!")
        assert result.score == 5
        assert result.strength == Strength.STRONG
        assert result.is_valid is True

    def test_four_criteria_is_strong(self, scorer: PasswordStrengthScorer):
        """Test missing special character still strong."""
        result = scorer.assess("Abcdefg1")
        assert result.score == 4
        assert result.strength == Strength.STRONG
        assert result.feedback.has_special_char is False

    def test_three_criteria_is_medium(self, scorer: PasswordStrengthScorer):
        """Test three criteria classify as medium and valid."""
        result = scorer.assess("Abcdefgh")
        assert result.score == 3
        assert result.strength == Strength.MEDIUM
        assert result.is_valid is True

    def test_two_criteria_is_weak(self, scorer: PasswordStrengthScorer):
        """Test two criteria classify as weak and invalid."""
        result = scorer.assess("abcdefgh")
        assert result.score == 2
        assert result.strength == Strength.WEAK
        assert result.is_valid is False

    def test_short_password_flags(self, scorer: PasswordStrengthScorer):
        """Test short password fails only the length criterion."""
        result = scorer.assess("Ab1!")
        assert result.score == 4
        assert result.feedback.min_length is False
        assert result.feedback.has_uppercase is True
        assert result.feedback.has_lowercase is True
        assert result.feedback.has_numbers is True
        assert result.feedback.has_special_char is True

    @pytest.mark.parametrize("special", list('!@#$%^&*(),.?":{}|<>'))
    def test_special_character_set(self, scorer: PasswordStrengthScorer, special: str):
        """Test every character of the special set is recognised."""
        assert scorer.assess(special).feedback.has_special_char is True

    @pytest.mark.parametrize("other", ["-", "_", "+", "=", "~", " ", "é"])
    def test_characters_outside_special_set(self, scorer: PasswordStrengthScorer, other: str):
        """Test characters outside the set do not count."""
        assert scorer.assess(other).feedback.has_special_char is False

    def test_non_ascii_letters_not_counted(self, scorer: PasswordStrengthScorer):
        """Test case criteria are ASCII only."""
        result = scorer.assess("ÄÖÜäöü")
        assert result.feedback.has_uppercase is False
        assert result.feedback.has_lowercase is False

    def test_is_valid_shortcut(self, scorer: PasswordStrengthScorer):
        """Test is_valid mirrors the assessment."""
        assert scorer.is_valid("Abcdefgh") is True
        assert scorer.is_valid("abc") is False

    def test_to_dict(self, scorer: PasswordStrengthScorer):
        """Test JSON form of an assessment."""
        data = scorer.assess("Abcdef1!").to_dict()
        assert data == {
            "isValid": True,
            "strength": "strong",
            "score": 5,
            "feedback": {
                "min_length": True,
                "has_uppercase": True,
                "has_lowercase": True,
                "has_numbers": True,
                "has_special_char": True,
            },
        }

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(0, Strength.WEAK), (2, Strength.WEAK), (3, Strength.MEDIUM), (4, Strength.STRONG), (5, Strength.STRONG)],
    )
    def test_classify(self, scorer: PasswordStrengthScorer, score: int, expected: Strength):
        """Test score thresholds."""
        assert scorer.classify(score) == expected
