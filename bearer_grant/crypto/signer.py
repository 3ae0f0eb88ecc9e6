"""RS256 signing of JWT-bearer assertions."""

import jwt

from bearer_grant.core.errors import SigningError
from bearer_grant.crypto.keys import load_rsa_private_key
from bearer_grant.crypto.types import ClaimSet

ALGORITHM = "RS256"


def assertion_header(key_id: str | None = None) -> dict[str, str]:
    """Build the fixed JOSE header, with ``kid`` when the key is identified."""
    header = {"alg": ALGORITHM, "typ": "JWT"}
    if key_id:
        header["kid"] = key_id
    return header


def sign_claims(
    claims: ClaimSet, private_key_pem: str, header: dict[str, str]
) -> str:
    """Sign ``claims`` into a compact JWS with the RSA private key."""
    key = load_rsa_private_key(private_key_pem)
    extra_headers = {k: v for k, v in header.items() if k != "alg"}
    try:
        return jwt.encode(
            claims.model_dump(),
            key,
            algorithm=ALGORITHM,
            headers=extra_headers,
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise SigningError("Failed to sign assertion") from exc
