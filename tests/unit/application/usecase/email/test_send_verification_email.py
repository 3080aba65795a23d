"""Unit tests for SendVerificationEmailUseCase."""

import pytest

from uniflow.adapter.sendgrid import MockSendGridEmailClient
from uniflow.application.usecase.email import SendVerificationEmailUseCase
from uniflow.application.usecase.email.send_verification_email import (
    SendVerificationEmailRequest,
)
from uniflow.domain.error import MissingFieldsError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSendVerificationEmailUseCase:
    @pytest.mark.asyncio
    async def test_sends_code(self, unit_env):
        use_case = await unit_env.get(SendVerificationEmailUseCase)
        email_client = await unit_env.get(MockSendGridEmailClient)

        response = await use_case.execute(
            SendVerificationEmailRequest(email="ada@uni.edu", code="482913")
        )

        assert response.success
        assert response.message == "Verification email sent successfully"
        assert email_client.sent[0].to == "ada@uni.edu"

    @pytest.mark.asyncio
    async def test_numeric_code_is_accepted(self, unit_env):
        use_case = await unit_env.get(SendVerificationEmailUseCase)
        email_client = await unit_env.get(MockSendGridEmailClient)

        await use_case.execute(SendVerificationEmailRequest(email="a@b.com", code=482913))

        assert "482913" in email_client.sent[0].text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,code",
        [
            (None, "482913"),
            ("a@b.com", None),
            ("", "482913"),
            ("a@b.com", ""),
            ("a@b.com", 0),
        ],
    )
    async def test_missing_fields(self, unit_env, email, code):
        use_case = await unit_env.get(SendVerificationEmailUseCase)
        email_client = await unit_env.get(MockSendGridEmailClient)

        with pytest.raises(MissingFieldsError) as exc_info:
            await use_case.execute(SendVerificationEmailRequest(email=email, code=code))

        assert exc_info.value.message == "Missing required fields: email, code"
        assert email_client.sent == []
