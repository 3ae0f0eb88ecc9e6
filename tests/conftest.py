"""Shared test fixtures for bearer-grant."""

from typing import Any

import pytest

from bearer_grant.credentials.scopes import Scope
from bearer_grant.crypto.keys import generate_rsa_keypair
from bearer_grant.crypto.types import RSAKeyPair
from bearer_grant.oauth.auth_config import AuthConfig

TOKEN_URI = "https://oauth2.example.test/token"
CLIENT_EMAIL = "svc-reader@demo-project.iam.example.test"
PRIVATE_KEY_ID = "0123456789abcdef0123456789abcdef01234567"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BEARER_GRANT_* variables from the host out of settings."""
    for name in (
        "BEARER_GRANT_CREDENTIALS_FILE",
        "BEARER_GRANT_DEFAULT_SCOPE",
        "BEARER_GRANT_DEFAULT_LIFETIME",
        "BEARER_GRANT_LOG_LEVEL",
        "BEARER_GRANT_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_keypair() -> RSAKeyPair:
    """One RSA keypair for the whole session; generation is slow."""
    return generate_rsa_keypair()


@pytest.fixture(scope="session")
def other_keypair() -> RSAKeyPair:
    """A second, unrelated RSA keypair."""
    return generate_rsa_keypair()


@pytest.fixture
def service_account(rsa_keypair: RSAKeyPair) -> dict[str, Any]:
    """A complete service account key file as a mapping."""
    return {
        "type": "service_account",
        "project_id": "demo-project",
        "private_key_id": PRIVATE_KEY_ID,
        "private_key": rsa_keypair.private_key_pem,
        "client_email": CLIENT_EMAIL,
        "client_id": "000000000000000000000",
        "auth_uri": "https://accounts.example.test/o/oauth2/auth",
        "token_uri": TOKEN_URI,
        "auth_provider_x509_cert_url": "https://www.example.test/oauth2/v1/certs",
        "client_x509_cert_url": "https://www.example.test/robot/v1/metadata/x509",
        "universe_domain": "example.test",
    }


@pytest.fixture
def auth_config(service_account: dict[str, Any]) -> AuthConfig:
    """AuthConfig for the Cloud Vision scope."""
    return AuthConfig.build(service_account, Scope.CLOUD_VISION)
