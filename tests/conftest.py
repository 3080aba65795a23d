"""Test configuration and fixtures."""

import logfire
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from uniflow.config import PasswordSetupSettings


def pytest_configure(config):
    """Keep telemetry local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def enforce_tokens(monkeypatch):
    """Turn on the password setup token ledger for containers built afterwards."""
    monkeypatch.setenv("PASSWORD_SETUP__ENFORCE_TOKENS", "true")


@pytest.fixture
def ledger_settings() -> PasswordSetupSettings:
    return PasswordSetupSettings(enforce_tokens=True, token_ttl_hours=24)


@pytest.fixture(scope="session")
def rsa_key():
    """RSA key standing in for Google's signing and service account keys."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
