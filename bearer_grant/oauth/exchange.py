"""Token endpoint client for the JWT-bearer grant."""

import httpx

from bearer_grant.core.errors import ResponseDecodeError, TransportError
from bearer_grant.core.logging import get_logger
from bearer_grant.oauth.classifier import parse_response
from bearer_grant.oauth.types import (
    CONTENT_TYPE,
    GRANT_TYPE,
    ErrorResponse,
    ExchangeResponse,
)

logger = get_logger(__name__)


async def exchange(
    audience_url: str,
    signed_assertion: str,
    client: httpx.AsyncClient | None = None,
) -> ExchangeResponse:
    """POST one assertion to the token endpoint and decode the reply.

    Without ``client`` a fresh ``httpx.AsyncClient`` is opened for this call
    and closed before returning. Exactly one request is sent.
    """
    if client is None:
        async with httpx.AsyncClient() as fresh:
            return await _post_assertion(fresh, audience_url, signed_assertion)
    return await _post_assertion(client, audience_url, signed_assertion)


async def _post_assertion(
    client: httpx.AsyncClient, audience_url: str, signed_assertion: str
) -> ExchangeResponse:
    try:
        resp = await client.post(
            audience_url,
            data={"grant_type": GRANT_TYPE, "assertion": signed_assertion},
            headers={"Content-Type": CONTENT_TYPE},
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("token.exchange.failed", kind="transport", status=None)
        raise TransportError(
            f"Token request to {audience_url} failed: {exc}"
        ) from exc

    body = resp.text
    try:
        payload = resp.json()
    except ValueError as exc:
        raise _decode_failure(resp, body, "Response body is not JSON") from exc

    try:
        parsed = parse_response(payload, status_code=resp.status_code, body=body)
    except ResponseDecodeError as exc:
        raise _decode_failure(resp, body, str(exc)) from exc

    if not resp.is_success and not isinstance(parsed, ErrorResponse):
        raise _decode_failure(resp, body, "Token body sent with an error status")
    return parsed


def _decode_failure(
    resp: httpx.Response, body: str, message: str
) -> TransportError | ResponseDecodeError:
    """Pick the error kind for an unusable body: transport on non-2xx, else decode."""
    status = resp.status_code
    if not resp.is_success:
        logger.warning("token.exchange.failed", kind="transport", status=status)
        return TransportError(
            f"Token endpoint returned HTTP {status}: {message}", status_code=status
        )
    logger.warning("token.exchange.failed", kind="decode", status=status)
    return ResponseDecodeError(message, status_code=status, body=body)
