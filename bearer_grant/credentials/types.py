"""Service account credential bundle model and loaders."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bearer_grant.core.errors import CredentialParseError


class ServiceAccountInfo(BaseModel):
    """Service account key file as downloaded from the cloud console.

    Only ``client_email``, ``private_key`` and ``token_uri`` take part in
    signing and exchange. The remaining fields identify the key and are kept
    for callers that want them.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    client_email: str
    private_key: str = Field(repr=False)
    token_uri: str
    type: str | None = None
    project_id: str | None = None
    private_key_id: str | None = None
    client_id: str | None = None
    auth_uri: str | None = None
    auth_provider_x509_cert_url: str | None = None
    client_x509_cert_url: str | None = None
    universe_domain: str | None = None


CredentialSource = ServiceAccountInfo | str | bytes | dict[str, Any]


def load_service_account(source: CredentialSource) -> ServiceAccountInfo:
    """Parse a credential bundle from JSON text, bytes or a mapping."""
    if isinstance(source, ServiceAccountInfo):
        return source
    try:
        if isinstance(source, (str, bytes)):
            return ServiceAccountInfo.model_validate_json(source)
        return ServiceAccountInfo.model_validate(source)
    except ValidationError as exc:
        raise CredentialParseError(
            f"Invalid service account credentials: {exc.error_count()} error(s)"
        ) from exc


def read_service_account(path: str | Path) -> ServiceAccountInfo:
    """Read and parse a credential bundle file."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise CredentialParseError(f"Cannot read credentials file {path}") from exc
    return load_service_account(raw)
