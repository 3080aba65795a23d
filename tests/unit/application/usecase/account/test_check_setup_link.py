"""Unit tests for CheckSetupLinkUseCase."""

import pytest

from uniflow.application.usecase.account import CheckSetupLinkUseCase
from uniflow.application.usecase.account.check_setup_link import CheckSetupLinkRequest
from uniflow.domain.service import SetupTokenService
from uniflow.domain.value import EmailAddress, SetupToken
from uniflow.persistence.repository.inmemory import InMemorySetupTokenRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCheckSetupLinkUseCase:
    @pytest.mark.asyncio
    async def test_complete_link_is_valid(self, unit_env):
        use_case = await unit_env.get(CheckSetupLinkUseCase)

        link = await use_case.execute(
            CheckSetupLinkRequest(email="Ada@Uni.edu", token="tok-1")
        )

        assert link.valid
        assert link.email == "ada@uni.edu"
        assert link.token == "tok-1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,token", [(None, "tok-1"), ("ada@uni.edu", None), ("", "")]
    )
    async def test_incomplete_link_is_invalid(self, unit_env, email, token):
        use_case = await unit_env.get(CheckSetupLinkUseCase)

        link = await use_case.execute(CheckSetupLinkRequest(email=email, token=token))

        assert not link.valid

    @pytest.mark.asyncio
    async def test_enforced_ledger_rejects_unrecorded_token(self, ledger_settings):
        tokens = SetupTokenService(InMemorySetupTokenRepository(), ledger_settings)
        await tokens.record(EmailAddress("ada@uni.edu"), SetupToken("tok-1"))
        use_case = CheckSetupLinkUseCase(tokens)

        recorded = await use_case.execute(
            CheckSetupLinkRequest(email="ada@uni.edu", token="tok-1")
        )
        forged = await use_case.execute(
            CheckSetupLinkRequest(email="ada@uni.edu", token="tok-2")
        )

        assert recorded.valid
        assert not forged.valid
