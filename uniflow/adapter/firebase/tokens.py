"""Firebase ID token verification.

ID tokens are RS256 JWTs signed by ``securetoken@system.gserviceaccount.com``.
Signing keys rotate; the published JWKS is cached for as long as its
``Cache-Control: max-age`` allows.
"""

import asyncio
import re
import time
from typing import Any

import httpx
import jwt
import logfire

from .errors import FirebaseAuthError, FirebaseTokenError

JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/"
    "securetoken@system.gserviceaccount.com"
)
ISSUER_PREFIX = "https://securetoken.google.com/"
DEFAULT_JWKS_MAX_AGE = 3600

_MAX_AGE = re.compile(r"max-age=(\d+)")


class IdTokenVerifier:
    """Verifies Firebase ID tokens for one project."""

    def __init__(self, project_id: str, timeout: float = 30.0) -> None:
        """Initialize verifier.

        Args:
            project_id: Firebase project id (expected ``aud``)
            timeout: JWKS fetch timeout in seconds
        """
        self.project_id = project_id
        self.issuer = ISSUER_PREFIX + project_id
        self.timeout = timeout

        self._keys: jwt.PyJWKSet | None = None
        self._keys_expire_at: float = 0.0
        self._lock = asyncio.Lock()

    async def verify(self, token: str) -> dict[str, Any]:
        """Verify signature, expiry, audience and issuer.

        Returns:
            Decoded claims; ``sub`` is the account id

        Raises:
            FirebaseTokenError: If the token is invalid
            FirebaseAuthError: If signing keys cannot be fetched
        """
        try:
            header = jwt.get_unverified_header(token)
        except jwt.InvalidTokenError as e:
            raise FirebaseTokenError(f"Malformed token: {e}") from e

        if header.get("alg") != "RS256":
            raise FirebaseTokenError(f"Unexpected algorithm: {header.get('alg')}")

        kid = header.get("kid")
        if not kid:
            raise FirebaseTokenError("Token has no key id")

        signing_key = await self._get_signing_key(kid)

        try:
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                audience=self.project_id,
                issuer=self.issuer,
                options={"require": ["exp", "iat", "aud", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise FirebaseTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise FirebaseTokenError(f"Invalid token: {e}") from e

        if not claims.get("sub"):
            raise FirebaseTokenError("Token has an empty subject")
        return claims

    async def _get_signing_key(self, kid: str) -> jwt.PyJWK:
        keys = await self._get_keys()
        try:
            return keys[kid]
        except KeyError:
            pass

        # Unknown kid: keys may have rotated since the last fetch
        keys = await self._get_keys(force=True)
        try:
            return keys[kid]
        except KeyError as e:
            raise FirebaseTokenError(f"Unknown signing key: {kid}") from e

    async def _get_keys(self, force: bool = False) -> jwt.PyJWKSet:
        async with self._lock:
            if not force and self._keys and time.time() < self._keys_expire_at:
                return self._keys

            keys, max_age = await self._fetch_keys()
            self._keys = keys
            self._keys_expire_at = time.time() + max_age
            return keys

    async def _fetch_keys(self) -> tuple[jwt.PyJWKSet, int]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(JWKS_URL, timeout=self.timeout)

                if response.status_code != 200:
                    logfire.error(
                        "Firebase signing key fetch failed",
                        status_code=response.status_code,
                    )
                    raise FirebaseAuthError(
                        f"Signing key fetch failed: {response.status_code}"
                    )

                keys = jwt.PyJWKSet.from_dict(response.json())

        except httpx.HTTPError as e:
            logfire.error("Firebase signing key HTTP error", error=str(e))
            raise FirebaseAuthError(f"HTTP error fetching signing keys: {e}") from e
        except jwt.PyJWKSetError as e:
            raise FirebaseAuthError(f"Invalid signing key set: {e}") from e

        match = _MAX_AGE.search(response.headers.get("cache-control", ""))
        max_age = int(match.group(1)) if match else DEFAULT_JWKS_MAX_AGE
        logfire.info("Firebase signing keys refreshed", count=len(keys.keys))
        return keys, max_age
