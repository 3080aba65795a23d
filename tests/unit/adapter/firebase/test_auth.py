"""Unit tests for the Identity Toolkit gateway."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from uniflow.adapter.firebase import FirebaseAuthError, RealFirebaseIdentityGateway
from uniflow.adapter.firebase.credentials import ServiceAccountCredentials
from uniflow.domain.value import AccountId, EmailAddress

BASE_URL = "https://identitytoolkit.googleapis.com/v1/projects/uniflow-test"


@pytest.fixture
def gateway():
    """Gateway with the access token exchange stubbed out."""
    with patch.object(
        ServiceAccountCredentials,
        "get_access_token",
        AsyncMock(return_value="ya29.test"),
    ):
        yield RealFirebaseIdentityGateway(
            project_id="uniflow-test",
            client_email="firebase-adminsdk@uniflow-test.iam.gserviceaccount.com",
            private_key="unused",
        )


class TestGetAccountByEmail:
    @pytest.mark.asyncio
    async def test_parses_account_record(self, gateway):
        record = {
            "localId": "uid-123",
            "email": "Ada@Uni.edu",
            "displayName": "Ada",
            "providerUserInfo": [
                {"providerId": "google.com", "rawId": "1234"},
            ],
        }

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"users": [record]})

            account = await gateway.get_account_by_email(EmailAddress("ada@uni.edu"))

            assert account.id == "uid-123"
            assert account.email == "ada@uni.edu"
            assert account.providers == ("google.com",)
            assert not account.has_password

            args, kwargs = mock_client.post.call_args
            assert args[0] == f"{BASE_URL}/accounts:lookup"
            assert kwargs["json"] == {"email": ["ada@uni.edu"]}
            assert kwargs["headers"]["Authorization"] == "Bearer ya29.test"

    @pytest.mark.asyncio
    async def test_unknown_email_returns_none(self, gateway):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"kind": "lookup"})

            assert await gateway.get_account_by_email(EmailAddress("x@y.com")) is None


class TestListProviders:
    @pytest.mark.asyncio
    async def test_reads_fresh_providers(self, gateway):
        record = {
            "localId": "uid-123",
            "providerUserInfo": [
                {"providerId": "google.com"},
                {"providerId": "password"},
            ],
        }

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"users": [record]})

            providers = await gateway.list_providers(AccountId("uid-123"))

            assert providers == ("google.com", "password")
            assert mock_client.post.call_args.kwargs["json"] == {"localId": ["uid-123"]}

    @pytest.mark.asyncio
    async def test_missing_account_raises(self, gateway):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={})

            with pytest.raises(FirebaseAuthError):
                await gateway.list_providers(AccountId("uid-123"))


class TestSetPassword:
    @pytest.mark.asyncio
    async def test_posts_account_update(self, gateway):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200, json={"localId": "uid-123"})

            await gateway.set_password(AccountId("uid-123"), "secret1")

            args, kwargs = mock_client.post.call_args
            assert args[0] == f"{BASE_URL}/accounts:update"
            assert kwargs["json"] == {"localId": "uid-123", "password": "secret1"}

    @pytest.mark.asyncio
    async def test_provider_error_message_is_surfaced(self, gateway):
        error = {
            "error": {
                "code": 400,
                "message": "WEAK_PASSWORD : Password should be at least 6 characters",
            }
        }

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(400, json=error)

            with pytest.raises(FirebaseAuthError) as exc_info:
                await gateway.set_password(AccountId("uid-123"), "123")

            assert str(exc_info.value).startswith("WEAK_PASSWORD")

    @pytest.mark.asyncio
    async def test_non_json_error_falls_back_to_status(self, gateway):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(502, text="Bad Gateway")

            with pytest.raises(FirebaseAuthError, match="502"):
                await gateway.set_password(AccountId("uid-123"), "secret1")
