"""Error taxonomy for assertion signing and token exchange."""

BODY_PREVIEW_LIMIT = 512


class TokenGenerationError(Exception):
    """Base class for every failure raised while obtaining a token."""


class InvalidLifetimeError(TokenGenerationError):
    """Requested assertion lifetime is outside the accepted bound."""

    def __init__(self, lifetime: object, minimum: int, maximum: int) -> None:
        self.lifetime = lifetime
        super().__init__(
            f"The provided lifetime '{lifetime}' is out of range "
            f"{minimum}..{maximum}."
        )


class CredentialParseError(TokenGenerationError):
    """Credential bundle is malformed or missing required fields."""


class SigningError(TokenGenerationError):
    """Private key could not be used to sign the assertion."""


class TransportError(TokenGenerationError):
    """Network-level failure while talking to the token endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ResponseDecodeError(TokenGenerationError):
    """Token endpoint body is not JSON or matches no known response shape."""

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        self.status_code = status_code
        self.body = body[:BODY_PREVIEW_LIMIT]
        super().__init__(message)


class AuthenticationError(TokenGenerationError):
    """Token endpoint rejected the assertion."""

    def __init__(self, error: str, error_description: str) -> None:
        self.error = error
        self.error_description = error_description
        super().__init__(f"{error}: {error_description}")
