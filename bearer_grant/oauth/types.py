"""Type definitions for the token endpoint exchange."""

from pydantic import BaseModel, ConfigDict, Field

GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"
CONTENT_TYPE = "application/x-www-form-urlencoded"


class TokenResponse(BaseModel):
    """Successful token endpoint response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    access_token: str = Field(repr=False)
    expires_in: int
    token_type: str


class ErrorResponse(BaseModel):
    """Error body returned when the endpoint rejects the assertion."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error: str
    error_description: str


ExchangeResponse = TokenResponse | ErrorResponse
