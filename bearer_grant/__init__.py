"""Service account access tokens through the OAuth2 JWT-bearer grant."""

from bearer_grant.core.errors import (
    AuthenticationError,
    CredentialParseError,
    InvalidLifetimeError,
    ResponseDecodeError,
    SigningError,
    TokenGenerationError,
    TransportError,
)
from bearer_grant.credentials.scopes import CustomScope, Scope
from bearer_grant.credentials.types import ServiceAccountInfo
from bearer_grant.oauth.auth_config import AuthConfig

__all__ = [
    "AuthConfig",
    "AuthenticationError",
    "CredentialParseError",
    "CustomScope",
    "InvalidLifetimeError",
    "ResponseDecodeError",
    "Scope",
    "ServiceAccountInfo",
    "SigningError",
    "TokenGenerationError",
    "TransportError",
]
