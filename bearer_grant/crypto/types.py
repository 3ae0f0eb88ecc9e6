"""Type definitions for assertion claims and signing keys."""

from pydantic import BaseModel, ConfigDict, Field


class ClaimSet(BaseModel):
    """Payload of a JWT-bearer assertion."""

    model_config = ConfigDict(frozen=True)

    iss: str
    scope: str
    aud: str
    iat: int
    exp: int


class RSAKeyPair(BaseModel):
    """An RSA keypair in PEM form."""

    model_config = ConfigDict(frozen=True)

    private_key_pem: str = Field(repr=False)
    public_key_pem: str
