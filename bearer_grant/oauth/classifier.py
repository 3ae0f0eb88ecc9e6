"""Disambiguation of token endpoint responses."""

from pydantic import ValidationError

from bearer_grant.core.errors import AuthenticationError, ResponseDecodeError
from bearer_grant.oauth.types import ErrorResponse, ExchangeResponse, TokenResponse

TOKEN_FIELDS = frozenset({"access_token", "expires_in", "token_type"})
ERROR_FIELDS = frozenset({"error", "error_description"})


def parse_response(
    payload: object, status_code: int | None = None, body: str = ""
) -> ExchangeResponse:
    """Match a decoded JSON body against the token shape, then the error shape.

    The endpoint sends no discriminant, so the variant is picked by which
    fields are present. A body carrying fields of both shapes is rejected.
    """
    if not isinstance(payload, dict):
        raise ResponseDecodeError(
            "Token endpoint response is not a JSON object",
            status_code=status_code,
            body=body,
        )

    keys = set(payload)
    try:
        if TOKEN_FIELDS <= keys and not ERROR_FIELDS & keys:
            return TokenResponse.model_validate(payload)
        if ERROR_FIELDS <= keys and not TOKEN_FIELDS & keys:
            return ErrorResponse.model_validate(payload)
    except ValidationError as exc:
        raise ResponseDecodeError(
            "Token endpoint response has invalid field types",
            status_code=status_code,
            body=body,
        ) from exc

    raise ResponseDecodeError(
        "Token endpoint response matches no known shape",
        status_code=status_code,
        body=body,
    )


def classify(response: ExchangeResponse) -> str:
    """Return the access token, or raise the endpoint's error verbatim."""
    if isinstance(response, TokenResponse):
        return response.access_token
    raise AuthenticationError(response.error, response.error_description)
