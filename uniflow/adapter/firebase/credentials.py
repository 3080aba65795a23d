"""Google service account credentials.

Exchanges a self-signed JWT assertion for an OAuth2 access token
(RFC 7523 JWT bearer grant) to call the Identity Toolkit admin API.
"""

import asyncio
import time

import httpx
import jwt
import logfire
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from .errors import FirebaseAuthError

TOKEN_URL = "https://oauth2.googleapis.com/token"
SCOPES = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/identitytoolkit",
)

# Assertions are valid for at most one hour
ASSERTION_LIFETIME_SECONDS = 3600

# Refresh access tokens this long before Google expires them
EXPIRY_MARGIN_SECONDS = 60


def load_private_key(pem: str) -> RSAPrivateKey:
    """Parse a PEM-encoded service account key.

    Raises:
        FirebaseAuthError: If the key is not an RSA private key
    """
    try:
        key = serialization.load_pem_private_key(pem.encode(), password=None)
    except ValueError as e:
        raise FirebaseAuthError(f"Invalid service account private key: {e}") from e
    if not isinstance(key, RSAPrivateKey):
        raise FirebaseAuthError("Service account private key must be RSA")
    return key


class ServiceAccountCredentials:
    """Cached OAuth2 access token for a service account."""

    def __init__(
        self,
        client_email: str,
        private_key: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize credentials.

        Args:
            client_email: Service account email (``iss`` of the assertion)
            private_key: PEM private key with real newlines
            timeout: Token endpoint timeout in seconds
        """
        self.client_email = client_email
        self.private_key = private_key
        self.timeout = timeout

        self._access_token: str | None = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    def build_assertion(self, now: int | None = None) -> str:
        """Sign the JWT bearer assertion with the service account key."""
        now = now if now is not None else int(time.time())
        claims = {
            "iss": self.client_email,
            "sub": self.client_email,
            "scope": " ".join(SCOPES),
            "aud": TOKEN_URL,
            "iat": now,
            "exp": now + ASSERTION_LIFETIME_SECONDS,
        }
        return jwt.encode(
            claims, load_private_key(self.private_key), algorithm="RS256"
        )

    async def get_access_token(self) -> str:
        """Return a valid access token, fetching a new one when needed.

        Raises:
            FirebaseAuthError: If the token exchange fails
        """
        async with self._lock:
            if self._access_token and time.time() < self._expires_at:
                return self._access_token

            token, expires_in = await self._fetch_access_token()
            self._access_token = token
            self._expires_at = time.time() + expires_in - EXPIRY_MARGIN_SECONDS
            return token

    async def _fetch_access_token(self) -> tuple[str, int]:
        data = {
            "grant_type": "urn:ietf:params:oauth:grant-type:jwt-bearer",
            "assertion": self.build_assertion(),
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    TOKEN_URL,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise FirebaseAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                result = response.json()
                logfire.info("Google access token refreshed")
                return result["access_token"], int(result.get("expires_in", 3600))

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise FirebaseAuthError(f"HTTP error during token exchange: {e}") from e
