"""Unit tests for NotificationService."""

import pytest

from uniflow.adapter.sendgrid import MockSendGridEmailClient
from uniflow.config import EmailSettings, PasswordSetupSettings
from uniflow.domain.error import DeliveryFailedError, ServiceUnavailableError
from uniflow.domain.service import NotificationService


def make_service(client: MockSendGridEmailClient) -> NotificationService:
    return NotificationService(client, EmailSettings(), PasswordSetupSettings())


class TestSendVerificationCode:
    """Tests for NotificationService.send_verification_code()."""

    @pytest.mark.asyncio
    async def test_sends_code_with_ten_minute_expiry(self):
        client = MockSendGridEmailClient()
        service = make_service(client)

        await service.send_verification_code("ada@uni.edu", "482913")

        assert len(client.sent) == 1
        message = client.sent[0]
        assert message.to == "ada@uni.edu"
        assert message.subject == "Your UniFlow Verification Code"
        assert "482913" in message.html
        assert "482913" in message.text
        assert "expire in 10 minutes" in message.text

    @pytest.mark.asyncio
    async def test_two_calls_send_two_emails(self):
        client = MockSendGridEmailClient()
        service = make_service(client)

        await service.send_verification_code("ada@uni.edu", "1")
        await service.send_verification_code("ada@uni.edu", "1")

        assert len(client.sent) == 2

    @pytest.mark.asyncio
    async def test_code_is_html_escaped(self):
        client = MockSendGridEmailClient()
        service = make_service(client)

        await service.send_verification_code("ada@uni.edu", "<b>1</b>")

        assert "<b>1</b>" not in client.sent[0].html
        assert "&lt;b&gt;1&lt;/b&gt;" in client.sent[0].html

    @pytest.mark.asyncio
    async def test_unconfigured_client_is_unavailable(self):
        client = MockSendGridEmailClient(configured=False)
        service = make_service(client)

        with pytest.raises(ServiceUnavailableError) as exc_info:
            await service.send_verification_code("ada@uni.edu", "482913")

        assert exc_info.value.message == "Email delivery not configured"
        assert client.sent == []

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_delivery_failed(self):
        client = MockSendGridEmailClient(fail_with="The from address does not match")
        service = make_service(client)

        with pytest.raises(DeliveryFailedError) as exc_info:
            await service.send_verification_code("ada@uni.edu", "482913")

        assert exc_info.value.message == "Failed to send verification email"
        assert exc_info.value.details == "The from address does not match"


class TestSendPasswordSetupLink:
    """Tests for NotificationService.send_password_setup_link()."""

    @pytest.mark.asyncio
    async def test_sends_link_with_day_expiry(self):
        client = MockSendGridEmailClient()
        service = make_service(client)
        url = "https://api.uniflow.app/api/setup-password?token=t&email=a%40b.com"

        await service.send_password_setup_link("a@b.com", url)

        message = client.sent[0]
        assert message.subject == "Set Up Your Password - UniFlow"
        assert url in message.text
        assert "token=t&amp;email=a%40b.com" in message.html
        assert "expire in 24 hours" in message.text

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_delivery_failed(self):
        service = make_service(MockSendGridEmailClient(fail_with="rate limited"))

        with pytest.raises(DeliveryFailedError) as exc_info:
            await service.send_password_setup_link("a@b.com", "https://x")

        assert exc_info.value.message == "Failed to send password setup email"
