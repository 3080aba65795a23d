"""Unit tests for AccountLinkingService."""

import asyncio
from datetime import timedelta

import pytest

from uniflow.adapter.firebase import MockFirebaseIdentityGateway
from uniflow.config import PasswordSetupSettings
from uniflow.domain.error import (
    AccountNotFoundError,
    AlreadyLinkedError,
    InvalidSetupTokenError,
    LinkingError,
    MissingFieldsError,
    ServiceUnavailableError,
)
from uniflow.domain.model.common import utc_now
from uniflow.domain.service import AccountLinkingService, SetupTokenService
from uniflow.domain.value import EmailAddress, SetupToken
from uniflow.persistence.repository.inmemory import InMemorySetupTokenRepository
from uniflow.util.locks import KeyedLock


def make_service(
    gateway: MockFirebaseIdentityGateway,
    settings: PasswordSetupSettings | None = None,
    token_repo: InMemorySetupTokenRepository | None = None,
) -> AccountLinkingService:
    setup_tokens = SetupTokenService(
        token_repo or InMemorySetupTokenRepository(),
        settings or PasswordSetupSettings(),
    )
    return AccountLinkingService(gateway, setup_tokens, KeyedLock())


class TestLinkPassword:
    """Tests for AccountLinkingService.link_password()."""

    @pytest.mark.asyncio
    async def test_links_password_to_federated_only_account(self):
        """Should add the password provider exactly once."""
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com", providers=("google.com",))
        service = make_service(gateway)

        await service.link_password("a@b.com", "secret1", "t")

        assert gateway.accounts["uid-1"].providers == ("google.com", "password")
        assert gateway.password_sets == [("uid-1", "secret1")]

    @pytest.mark.asyncio
    async def test_second_call_fails_already_linked(self):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        service = make_service(gateway)

        await service.link_password("a@b.com", "secret1", "t")
        with pytest.raises(AlreadyLinkedError) as exc_info:
            await service.link_password("a@b.com", "secret2", "t")

        assert exc_info.value.message == "This account already has a password set"
        assert len(gateway.password_sets) == 1

    @pytest.mark.asyncio
    async def test_account_with_password_is_never_mutated(self):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com", providers=("google.com", "password"))
        service = make_service(gateway)

        with pytest.raises(AlreadyLinkedError):
            await service.link_password("a@b.com", "secret1", "t")

        assert gateway.password_sets == []

    @pytest.mark.asyncio
    async def test_unknown_email_fails_before_mutation(self):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        service = make_service(gateway)

        with pytest.raises(AccountNotFoundError) as exc_info:
            await service.link_password("nobody@b.com", "secret1", "t")

        assert exc_info.value.message == "No account found with this email"
        assert gateway.password_sets == []

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_insensitive(self):
        """'User@X.com' and 'user@x.com' resolve to the same account."""
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "user@x.com")
        service = make_service(gateway)

        await service.link_password("User@X.com", "secret1", "t")

        assert gateway.password_sets == [("uid-1", "secret1")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password,token",
        [(None, "secret1", "t"), ("a@b.com", "", "t"), ("a@b.com", "secret1", None)],
    )
    async def test_missing_fields(self, email, password, token):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        service = make_service(gateway)

        with pytest.raises(MissingFieldsError) as exc_info:
            await service.link_password(email, password, token)

        assert exc_info.value.message == "Missing required fields: email, password, token"
        assert gateway.password_sets == []

    @pytest.mark.asyncio
    async def test_missing_fields_checked_before_configuration(self):
        service = make_service(MockFirebaseIdentityGateway(configured=False))

        with pytest.raises(MissingFieldsError):
            await service.link_password("a@b.com", None, "t")

    @pytest.mark.asyncio
    async def test_unconfigured_provider_is_unavailable(self):
        service = make_service(MockFirebaseIdentityGateway(configured=False))

        with pytest.raises(ServiceUnavailableError):
            await service.link_password("a@b.com", "secret1", "t")

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_linking_error(self):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        gateway.fail_with = "WEAK_PASSWORD : Password should be at least 6 characters"
        service = make_service(gateway)

        with pytest.raises(LinkingError) as exc_info:
            await service.link_password("a@b.com", "123", "t")

        assert exc_info.value.message == "Failed to set password"
        assert "WEAK_PASSWORD" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_concurrent_calls_link_exactly_once(self):
        """Concurrent setups for one account must not both succeed."""
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        service = make_service(gateway)

        results = await asyncio.gather(
            *(service.link_password("a@b.com", f"secret{i}", "t") for i in range(5)),
            return_exceptions=True,
        )

        successes = [r for r in results if r is None]
        failures = [r for r in results if isinstance(r, AlreadyLinkedError)]
        assert len(successes) == 1
        assert len(failures) == 4
        assert len(gateway.password_sets) == 1


class TestLinkPasswordWithTokenLedger:
    """Tests for link_password() with token enforcement on."""

    @pytest.mark.asyncio
    async def test_recorded_token_is_usable_once(self, ledger_settings):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        gateway.add_account("uid-2", "c@d.com")
        repo = InMemorySetupTokenRepository()
        setup_tokens = SetupTokenService(repo, ledger_settings)
        service = AccountLinkingService(gateway, setup_tokens, KeyedLock())

        await setup_tokens.record(EmailAddress("a@b.com"), SetupToken("tok-1"))
        await service.link_password("a@b.com", "secret1", "tok-1")

        assert gateway.password_sets == [("uid-1", "secret1")]

        # The token is bound to a@b.com and already consumed
        with pytest.raises(InvalidSetupTokenError):
            await service.link_password("c@d.com", "secret1", "tok-1")

    @pytest.mark.asyncio
    async def test_unknown_token_is_rejected(self, ledger_settings):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        service = make_service(gateway, ledger_settings)

        with pytest.raises(InvalidSetupTokenError) as exc_info:
            await service.link_password("a@b.com", "secret1", "made-up")

        assert exc_info.value.message == "Invalid or expired password setup link"
        assert gateway.password_sets == []

    @pytest.mark.asyncio
    async def test_token_for_another_email_is_rejected(self, ledger_settings):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        repo = InMemorySetupTokenRepository()
        setup_tokens = SetupTokenService(repo, ledger_settings)
        service = AccountLinkingService(gateway, setup_tokens, KeyedLock())

        await setup_tokens.record(EmailAddress("other@b.com"), SetupToken("tok-1"))

        with pytest.raises(InvalidSetupTokenError):
            await service.link_password("a@b.com", "secret1", "tok-1")

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        repo = InMemorySetupTokenRepository()
        setup_tokens = SetupTokenService(
            repo, PasswordSetupSettings(enforce_tokens=True, token_ttl_hours=0)
        )
        service = AccountLinkingService(gateway, setup_tokens, KeyedLock())

        await setup_tokens.record(EmailAddress("a@b.com"), SetupToken("tok-1"))

        with pytest.raises(InvalidSetupTokenError):
            await service.link_password("a@b.com", "secret1", "tok-1")

    @pytest.mark.asyncio
    async def test_already_linked_checked_before_token(self, ledger_settings):
        """An already-linked account must not burn a valid token."""
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com", providers=("google.com", "password"))
        repo = InMemorySetupTokenRepository()
        setup_tokens = SetupTokenService(repo, ledger_settings)
        service = AccountLinkingService(gateway, setup_tokens, KeyedLock())

        await setup_tokens.record(EmailAddress("a@b.com"), SetupToken("tok-1"))

        with pytest.raises(AlreadyLinkedError):
            await service.link_password("a@b.com", "secret1", "tok-1")

        record = await repo.find_by_hash(SetupToken("tok-1").digest())
        assert record.consumed_at is None
        assert record.expires_at > utc_now() + timedelta(hours=23)

    @pytest.mark.asyncio
    async def test_failed_link_keeps_token_for_retry(self, ledger_settings):
        gateway = MockFirebaseIdentityGateway()
        gateway.add_account("uid-1", "a@b.com")
        repo = InMemorySetupTokenRepository()
        setup_tokens = SetupTokenService(repo, ledger_settings)
        service = AccountLinkingService(gateway, setup_tokens, KeyedLock())
        await setup_tokens.record(EmailAddress("a@b.com"), SetupToken("tok-1"))

        gateway.fail_with = "INTERNAL_ERROR"
        with pytest.raises(LinkingError):
            await service.link_password("a@b.com", "secret1", "tok-1")

        record = await repo.find_by_hash(SetupToken("tok-1").digest())
        assert record.consumed_at is None

        gateway.fail_with = None
        await service.link_password("a@b.com", "secret1", "tok-1")

        assert gateway.password_sets == [("uid-1", "secret1")]
        record = await repo.find_by_hash(SetupToken("tok-1").digest())
        assert record.consumed_at is not None
