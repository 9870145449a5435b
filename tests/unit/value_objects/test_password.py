"""
Unit tests for RawPassword value object.

Tests cover:
- Weak, medium and strict tiers with their exact messages
- Character counting for non-ASCII input
- Strictness ordering between tiers
- Tier dispatch and configured default tier
- Secret masking in repr
"""

import pytest

from custom_type.core.config import get_settings
from custom_type.core.enums import PasswordStrength
from custom_type.core.errors import ParseError
from custom_type.core.result import ParseResult
from custom_type.value_objects.password import (
    MEDIUM_PASSWORD_MESSAGE,
    STRICT_PASSWORD_MESSAGE,
    WEAK_PASSWORD_MESSAGE,
    RawPassword,
)


@pytest.mark.unit
class TestWeakPassword:
    """Test suite for the weak tier."""

    def test_short_password_rejected(self):
        """Test passwords under 8 characters fail with the weak message."""
        assert RawPassword.parse_weak("short") == ParseResult.fail(
            ParseError("Weak password: must be at least 8 characters long")
        )

    @pytest.mark.parametrize("raw", ["validpass", "12345678", "        ", "aaaaaaaa"])
    def test_eight_or_more_characters_accepted(self, raw):
        """Test any 8+ character input passes."""
        assert RawPassword.parse_weak(raw).unwrap().value == raw

    def test_length_counts_characters_not_bytes(self):
        """Test non-ASCII characters count once each."""
        assert RawPassword.parse_weak("é" * 7).is_err()
        assert RawPassword.parse_weak("é" * 8).is_ok()


@pytest.mark.unit
class TestMediumPassword:
    """Test suite for the medium tier."""

    @pytest.mark.parametrize("raw", ["short", "noDigits", "12345678", "abc123", ""])
    def test_invalid_medium_password(self, raw):
        """Test inputs missing length, letters or digits are rejected."""
        result = RawPassword.parse_medium(raw)

        assert result.is_err()
        assert result.error.message == MEDIUM_PASSWORD_MESSAGE

    @pytest.mark.parametrize("raw", ["valid123", "1234567a", "ABCDEFG1", "pass word 1"])
    def test_valid_medium_password(self, raw):
        """Test inputs with letters and digits are accepted."""
        assert RawPassword.parse_medium(raw).unwrap().value == raw

    def test_non_ascii_letters_do_not_count(self):
        """Test only ASCII letters satisfy the letter requirement."""
        assert RawPassword.parse_medium("ééééééé1").is_err()


@pytest.mark.unit
class TestStrictPassword:
    """Test suite for the strict tier."""

    @pytest.mark.parametrize("raw", [
        "short",
        "NoDigits!",
        "noupper1!",
        "VALID123",
        "VALID123!",
        "Valid1234",
        "Va1!",
    ])
    def test_invalid_strict_password(self, raw):
        """Test inputs missing any character class are rejected."""
        assert RawPassword.parse_strict(raw) == ParseResult.fail(
            ParseError(
                "Strict password: must be at least 8 characters long and contain "
                "uppercase, lowercase, digits, and special characters"
            )
        )

    @pytest.mark.parametrize("raw", ["Valid123!", "Aa1 aaaa", "Pässw0rdX", "Zz9_zzzz"])
    def test_valid_strict_password(self, raw):
        """Test inputs with every character class are accepted."""
        assert RawPassword.parse_strict(raw).unwrap().value == raw

    def test_case_is_preserved(self):
        """Test passwords are not normalized."""
        assert str(RawPassword.parse_strict("MiXeD123!").unwrap()) == "MiXeD123!"


CANDIDATES = [
    "short",
    "validpass",
    "12345678",
    "valid123",
    "VALID123",
    "Valid123",
    "Valid123!",
    "NoDigits!",
    "éééééééé",
    "Aa1 aaaa",
    "        ",
]


@pytest.mark.unit
class TestTierOrdering:
    """Test the tiers get stricter from weak to strict."""

    @pytest.mark.parametrize("raw", CANDIDATES)
    def test_strict_implies_medium(self, raw):
        if RawPassword.parse_strict(raw).is_ok():
            assert RawPassword.parse_medium(raw).is_ok()

    @pytest.mark.parametrize("raw", CANDIDATES)
    def test_medium_implies_weak(self, raw):
        if RawPassword.parse_medium(raw).is_ok():
            assert RawPassword.parse_weak(raw).is_ok()

    def test_rank_follows_strictness(self):
        assert (
            PasswordStrength.WEAK.rank
            < PasswordStrength.MEDIUM.rank
            < PasswordStrength.STRICT.rank
        )


@pytest.mark.unit
class TestPasswordDispatch:
    """Test parse() with explicit and configured tiers."""

    @pytest.mark.parametrize("strength,message", [
        (PasswordStrength.WEAK, WEAK_PASSWORD_MESSAGE),
        (PasswordStrength.MEDIUM, MEDIUM_PASSWORD_MESSAGE),
        (PasswordStrength.STRICT, STRICT_PASSWORD_MESSAGE),
    ])
    def test_parse_uses_requested_tier(self, strength, message):
        assert RawPassword.parse("short", strength).error.message == message

    def test_parse_defaults_to_strict(self):
        assert RawPassword.parse("validpass").error.message == STRICT_PASSWORD_MESSAGE

    def test_parse_uses_configured_tier(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_TYPE_PASSWORD_STRENGTH", "weak")
        get_settings.cache_clear()

        assert RawPassword.parse("validpass").is_ok()

    def test_from_json_uses_configured_tier(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_TYPE_PASSWORD_STRENGTH", "medium")
        get_settings.cache_clear()

        assert RawPassword.from_json("valid123").value == "valid123"
        with pytest.raises(ParseError, match="Medium password"):
            RawPassword.from_json("validpass")


@pytest.mark.unit
class TestPasswordValueObject:
    """Test value object behavior of RawPassword."""

    def test_repr_masks_secret(self):
        password = RawPassword.parse_strict("Valid123!").unwrap()

        assert "Valid123!" not in repr(password)
        assert repr(password) == "RawPassword('********')"

    def test_equality_on_wrapped_string(self):
        assert (
            RawPassword.parse_weak("Valid123!").unwrap()
            == RawPassword.parse_strict("Valid123!").unwrap()
        )

    def test_immutability(self):
        password = RawPassword.parse_weak("validpass").unwrap()

        with pytest.raises(AttributeError):
            password.value = "changed!"

    def test_direct_instantiation_is_rejected(self):
        with pytest.raises(TypeError):
            RawPassword("whatever123")

    def test_reparse_rendered_value(self):
        password = RawPassword.parse_strict("Valid123!").unwrap()

        assert RawPassword.parse_strict(str(password)).unwrap() == password
