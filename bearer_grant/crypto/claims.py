"""Claim set construction with bounded lifetimes."""

from datetime import UTC, datetime

from bearer_grant.core.errors import InvalidLifetimeError
from bearer_grant.crypto.types import ClaimSet

MIN_LIFETIME = 30
MAX_LIFETIME = 3600


def validate_lifetime(lifetime: object) -> int:
    """Return ``lifetime`` if it is an integer in [MIN_LIFETIME, MAX_LIFETIME]."""
    if (
        isinstance(lifetime, bool)
        or not isinstance(lifetime, int)
        or not MIN_LIFETIME <= lifetime <= MAX_LIFETIME
    ):
        raise InvalidLifetimeError(lifetime, MIN_LIFETIME, MAX_LIFETIME)
    return lifetime


def build_claims(
    issuer: str,
    scope: str,
    audience: str,
    lifetime: int,
    now: datetime | None = None,
) -> ClaimSet:
    """Build the claim set for one assertion, issued now."""
    lifetime = validate_lifetime(lifetime)
    issued_at = int((now or datetime.now(UTC)).timestamp())
    return ClaimSet(
        iss=issuer,
        scope=scope,
        aud=audience,
        iat=issued_at,
        exp=issued_at + lifetime,
    )
