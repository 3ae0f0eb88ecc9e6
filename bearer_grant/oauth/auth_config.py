"""Reusable configuration for requesting service account access tokens."""

from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field

from bearer_grant.core.logging import get_logger
from bearer_grant.credentials.scopes import ScopeSelection, resolve_scope
from bearer_grant.credentials.types import (
    CredentialSource,
    ServiceAccountInfo,
    load_service_account,
    read_service_account,
)
from bearer_grant.crypto.claims import build_claims
from bearer_grant.crypto.signer import assertion_header, sign_claims
from bearer_grant.crypto.types import ClaimSet
from bearer_grant.oauth.classifier import classify
from bearer_grant.oauth.exchange import exchange
from bearer_grant.oauth.types import ErrorResponse

logger = get_logger(__name__)


class AuthConfig(BaseModel):
    """Everything needed to request access tokens for one service account.

    Build it once with :meth:`build` and call :meth:`generate_auth_token` as
    often as needed. The instance is frozen, so concurrent requests can share
    it freely. Tokens are not cached; every call signs a new assertion and
    performs one round trip to the token endpoint.
    """

    model_config = ConfigDict(frozen=True)

    issuer: str
    scope: str
    audience: str
    signing_key: str = Field(repr=False)
    key_id: str | None = None

    @classmethod
    def build(
        cls, credentials: CredentialSource, scope: ScopeSelection
    ) -> "AuthConfig":
        """Create a config from a service account bundle and a scope selection.

        Only the structure of the bundle is checked here. A private key that
        cannot sign is reported by the first :meth:`generate_auth_token`.
        """
        info = load_service_account(credentials)
        config = cls._from_info(info, resolve_scope(scope))
        logger.debug(
            "auth_config.built",
            issuer=config.issuer,
            audience=config.audience,
            scope=config.scope,
        )
        return config

    @classmethod
    def from_file(cls, path: str | Path, scope: ScopeSelection) -> "AuthConfig":
        """Create a config from a service account key file on disk."""
        return cls.build(read_service_account(path), scope)

    @classmethod
    def _from_info(cls, info: ServiceAccountInfo, scope: str) -> "AuthConfig":
        return cls(
            issuer=info.client_email,
            scope=scope,
            audience=info.token_uri,
            signing_key=info.private_key,
            key_id=info.private_key_id,
        )

    @property
    def header(self) -> dict[str, str]:
        """JOSE header attached to every assertion."""
        return assertion_header(self.key_id)

    def claims(self, lifetime: int) -> ClaimSet:
        """Fresh claim set for an assertion valid for ``lifetime`` seconds."""
        return build_claims(self.issuer, self.scope, self.audience, lifetime)

    def sign(self, claims: ClaimSet) -> str:
        """Sign ``claims`` with this config's private key."""
        return sign_claims(claims, self.signing_key, self.header)

    async def generate_auth_token(
        self, lifetime: int, client: httpx.AsyncClient | None = None
    ) -> str:
        """Request an access token backed by an assertion of ``lifetime`` seconds.

        ``lifetime`` must lie in [30, 3600]; it is checked before anything is
        signed or sent. ``client`` lets the caller supply its own
        ``httpx.AsyncClient``; otherwise one is opened for this call only.
        """
        claims = self.claims(lifetime)
        logger.debug("token.requested", issuer=self.issuer, lifetime=lifetime)

        assertion = self.sign(claims)
        response = await exchange(self.audience, assertion, client=client)

        if isinstance(response, ErrorResponse):
            logger.warning(
                "token.exchange.failed", kind="authentication", error=response.error
            )
        else:
            logger.info(
                "token.issued", issuer=self.issuer, expires_in=response.expires_in
            )
        return classify(response)
