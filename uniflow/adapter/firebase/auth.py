"""Firebase Authentication identity gateway.

Talks to the Identity Toolkit admin REST API with service account
credentials. Only the calls this service needs are implemented: token
verification, account lookup and setting a password.
"""

import asyncio
import time
from typing import Any

import httpx
import jwt
import logfire

from uniflow.domain.model import Account, Principal
from uniflow.domain.service.identity_gateway import IdentityGateway
from uniflow.domain.value import PASSWORD_PROVIDER, AccountId, EmailAddress

from .credentials import ServiceAccountCredentials
from .errors import FirebaseAuthError, FirebaseTokenError
from .tokens import ISSUER_PREFIX, IdTokenVerifier

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"


class FirebaseIdentityGateway(IdentityGateway):
    """Base class for Firebase identity gateways.

    Provides type distinction for dependency injection.
    """

    pass


def _account_from_record(record: dict[str, Any]) -> Account:
    """Build an Account from an Identity Toolkit user record."""
    providers = tuple(
        info["providerId"]
        for info in record.get("providerUserInfo", [])
        if info.get("providerId")
    )
    return Account(
        id=AccountId(record["localId"]),
        email=(record.get("email") or "").lower() or None,
        display_name=record.get("displayName"),
        providers=providers,
        disabled=record.get("disabled", False),
    )


def _principal_from_claims(claims: dict[str, Any]) -> Principal:
    return Principal(
        account_id=AccountId(claims["sub"]),
        email=claims.get("email"),
        claims=claims,
    )


class UnconfiguredFirebaseIdentityGateway(FirebaseIdentityGateway):
    """Stand-in used when no service account is configured.

    Reports itself as unconfigured; callers check ``is_configured`` first.
    """

    @property
    def is_configured(self) -> bool:
        return False

    async def verify_token(self, token: str) -> Principal:
        raise FirebaseAuthError("Firebase is not configured")

    async def get_account_by_email(self, email: EmailAddress) -> Account | None:
        raise FirebaseAuthError("Firebase is not configured")

    async def list_providers(self, account_id: AccountId) -> tuple[str, ...]:
        raise FirebaseAuthError("Firebase is not configured")

    async def set_password(self, account_id: AccountId, password: str) -> None:
        raise FirebaseAuthError("Firebase is not configured")


class RealFirebaseIdentityGateway(FirebaseIdentityGateway):
    """Firebase Authentication over the Identity Toolkit REST API."""

    def __init__(
        self,
        project_id: str,
        client_email: str,
        private_key: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Firebase gateway.

        Args:
            project_id: Firebase project id
            client_email: Service account email
            private_key: Service account PEM private key
            timeout: Request timeout in seconds
        """
        self.project_id = project_id
        self.timeout = timeout
        self.credentials = ServiceAccountCredentials(
            client_email=client_email, private_key=private_key, timeout=timeout
        )
        self.verifier = IdTokenVerifier(project_id, timeout=timeout)
        self.base_url = f"{IDENTITY_TOOLKIT_URL}/projects/{project_id}"

    @property
    def is_configured(self) -> bool:
        return True

    async def verify_token(self, token: str) -> Principal:
        """Verify a Firebase ID token.

        Raises:
            FirebaseTokenError: If the token is invalid
            FirebaseAuthError: If signing keys are unavailable
        """
        claims = await self.verifier.verify(token)
        return _principal_from_claims(claims)

    async def get_account_by_email(self, email: EmailAddress) -> Account | None:
        """Look up an account by email.

        Raises:
            FirebaseAuthError: If the lookup fails
        """
        records = await self._lookup({"email": [email.root]})
        if not records:
            logfire.info("Firebase account not found", email=email.root)
            return None
        return _account_from_record(records[0])

    async def list_providers(self, account_id: AccountId) -> tuple[str, ...]:
        """Read the current provider ids of an account.

        Raises:
            FirebaseAuthError: If the lookup fails or the account is gone
        """
        records = await self._lookup({"localId": [account_id]})
        if not records:
            raise FirebaseAuthError(f"Account disappeared: {account_id}")
        return _account_from_record(records[0]).providers

    async def set_password(self, account_id: AccountId, password: str) -> None:
        """Set a password on an account, linking the password provider.

        Raises:
            FirebaseAuthError: If Firebase rejects the update
        """
        await self._call("accounts:update", {"localId": account_id, "password": password})
        logfire.info("Firebase password set", account_id=account_id)

    async def _lookup(self, body: dict[str, Any]) -> list[dict[str, Any]]:
        result = await self._call("accounts:lookup", body)
        return result.get("users", [])

    async def _call(self, method: str, body: dict[str, Any]) -> dict[str, Any]:
        """POST to an Identity Toolkit admin method.

        Raises:
            FirebaseAuthError: On transport errors or non-200 responses
        """
        access_token = await self.credentials.get_access_token()

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.base_url}/{method}",
                    json=body,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    error = _error_message(response)
                    logfire.error(
                        "Firebase request failed",
                        method=method,
                        status_code=response.status_code,
                        error=error,
                    )
                    raise FirebaseAuthError(error)

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("Firebase HTTP error", method=method, error=str(e))
            raise FirebaseAuthError(f"HTTP error calling {method}: {e}") from e


def _error_message(response: httpx.Response) -> str:
    """Extract the Identity Toolkit error code, e.g. ``WEAK_PASSWORD : ...``."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"Firebase request failed: {response.status_code}"


class MockFirebaseIdentityGateway(FirebaseIdentityGateway):
    """In-memory Firebase stand-in for testing.

    Tokens are HS256 JWTs signed with a local secret and carry the same
    audience and issuer claims as real Firebase ID tokens, so expiry and
    claim checks behave like production.
    """

    def __init__(
        self,
        project_id: str = "uniflow-test",
        secret: str = "mock-firebase-signing-secret-for-tests",
        configured: bool = True,
    ) -> None:
        """Initialize mock gateway without real Firebase credentials."""
        self.project_id = project_id
        self.secret = secret
        self.configured = configured
        self.accounts: dict[str, Account] = {}
        self.password_sets: list[tuple[str, str]] = []
        self.fail_with: str | None = None

    @property
    def is_configured(self) -> bool:
        return self.configured

    def add_account(
        self,
        uid: str,
        email: str,
        providers: tuple[str, ...] = ("google.com",),
    ) -> Account:
        """Register an account; emails are stored lower-cased."""
        account = Account(id=AccountId(uid), email=email.lower(), providers=providers)
        self.accounts[uid] = account
        return account

    def issue_token(
        self, uid: str, email: str | None = None, expires_in: int = 3600
    ) -> str:
        """Sign an ID token for ``uid``; negative ``expires_in`` gives an expired one."""
        now = int(time.time())
        claims: dict[str, Any] = {
            "sub": uid,
            "aud": self.project_id,
            "iss": ISSUER_PREFIX + self.project_id,
            "iat": now,
            "exp": now + expires_in,
        }
        if email:
            claims["email"] = email
        return jwt.encode(claims, self.secret, algorithm="HS256")

    async def verify_token(self, token: str) -> Principal:
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=["HS256"],
                audience=self.project_id,
                issuer=ISSUER_PREFIX + self.project_id,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise FirebaseTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise FirebaseTokenError(f"Invalid token: {e}") from e
        return _principal_from_claims(claims)

    async def get_account_by_email(self, email: EmailAddress) -> Account | None:
        await asyncio.sleep(0)
        for account in self.accounts.values():
            if account.email == email.root:
                return account
        return None

    async def list_providers(self, account_id: AccountId) -> tuple[str, ...]:
        await asyncio.sleep(0)
        account = self.accounts.get(account_id)
        if account is None:
            raise FirebaseAuthError(f"Account disappeared: {account_id}")
        return account.providers

    async def set_password(self, account_id: AccountId, password: str) -> None:
        await asyncio.sleep(0)
        if self.fail_with:
            raise FirebaseAuthError(self.fail_with)

        account = self.accounts[account_id]
        if PASSWORD_PROVIDER not in account.providers:
            self.accounts[account_id] = account.model_copy(
                update={"providers": account.providers + (PASSWORD_PROVIDER,)}
            )
        self.password_sets.append((account_id, password))
