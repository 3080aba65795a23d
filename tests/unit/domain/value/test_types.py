"""Unit tests for domain value objects."""

import hashlib

import pytest
from pydantic import ValidationError

from uniflow.domain.value import EmailAddress, ProfileFields, SetupToken


class TestEmailAddress:
    def test_normalizes_case_and_whitespace(self):
        assert EmailAddress("  Ada.Lovelace@Uni.EDU ").root == "ada.lovelace@uni.edu"

    def test_equal_after_normalization(self):
        assert EmailAddress("A@B.com") == EmailAddress("a@b.com")

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            EmailAddress("   ")

    def test_accepts_long_address(self):
        local = "a" * 400

        assert EmailAddress(f"{local}@uni.edu").root == f"{local}@uni.edu"


class TestSetupToken:
    def test_digest_is_sha256_hex(self):
        token = SetupToken("abc123")

        assert token.digest() == hashlib.sha256(b"abc123").hexdigest()

    def test_redacted_hides_most_of_the_token(self):
        token = SetupToken("0123456789abcdef")

        assert token.redacted() == "01234567..."
        assert "89abcdef" not in token.redacted()

    def test_accepts_long_token(self):
        token = SetupToken("x" * 4096)

        assert token.digest() == hashlib.sha256(b"x" * 4096).hexdigest()

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            SetupToken("")


class TestProfileFields:
    """Only explicitly provided fields count as changes."""

    def test_changes_only_contains_set_fields(self):
        fields = ProfileFields(display_name="Ada")

        assert fields.changes() == {"display_name": "Ada"}

    def test_explicit_null_is_a_change(self):
        fields = ProfileFields(bio=None)

        assert fields.changes() == {"bio": None}

    def test_graduation_year_range(self):
        with pytest.raises(ValidationError):
            ProfileFields(graduation_year=1899)
        with pytest.raises(ValidationError):
            ProfileFields(graduation_year=2101)

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValidationError):
            ProfileFields(nickname="ada")
