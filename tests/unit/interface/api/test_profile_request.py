"""Unit tests for the profile write request body."""

import pytest
from pydantic import ValidationError

from uniflow.application.usecase.profile.common import ProfileView, to_profile_key
from uniflow.domain.value import ProfileFields
from uniflow.interface.api.routes.users import ProfileAPIRequest


class TestProfileAPIRequest:
    def test_camel_case_keys_map_to_fields(self):
        request = ProfileAPIRequest.model_validate(
            {"photoURL": "https://cdn.uniflow.app/ada.png", "graduationYear": 2026}
        )

        assert request.to_fields() == ProfileFields(
            photo_url="https://cdn.uniflow.app/ada.png", graduation_year=2026
        )

    def test_to_fields_keeps_only_sent_keys(self):
        request = ProfileAPIRequest.model_validate({"displayName": "Ada", "bio": None})

        assert request.to_fields().changes() == {"display_name": "Ada", "bio": None}

    def test_unknown_key_is_rejected(self):
        with pytest.raises(ValidationError):
            ProfileAPIRequest.model_validate({"isAdmin": True})

    def test_limits_match_profile_fields(self):
        with pytest.raises(ValidationError):
            ProfileAPIRequest.model_validate({"bio": "a" * 501})

    def test_request_and_response_use_the_same_keys(self):
        names = set(ProfileFields.model_fields)
        request_keys = {
            field.alias for field in ProfileAPIRequest.model_fields.values()
        }
        view_keys = {
            field.alias
            for name, field in ProfileView.model_fields.items()
            if name in names
        }

        assert request_keys == view_keys == {to_profile_key(n) for n in names}
