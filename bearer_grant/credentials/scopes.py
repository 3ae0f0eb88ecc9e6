"""Catalog of OAuth2 permission scopes."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

_GOOGLE_AUTH = "https://www.googleapis.com/auth"


class Scope(str, Enum):
    """Well-known scopes, mapped to the string the token endpoint expects."""

    OPENID = "openid"
    EMAIL = "email"
    PROFILE = "profile"
    CLOUD_PLATFORM = f"{_GOOGLE_AUTH}/cloud-platform"
    CLOUD_PLATFORM_READ_ONLY = f"{_GOOGLE_AUTH}/cloud-platform.read-only"
    CLOUD_VISION = f"{_GOOGLE_AUTH}/cloud-vision"
    CLOUD_TRANSLATION = f"{_GOOGLE_AUTH}/cloud-translation"
    DEVSTORAGE_READ_ONLY = f"{_GOOGLE_AUTH}/devstorage.read_only"
    DEVSTORAGE_READ_WRITE = f"{_GOOGLE_AUTH}/devstorage.read_write"
    DEVSTORAGE_FULL_CONTROL = f"{_GOOGLE_AUTH}/devstorage.full_control"
    BIGQUERY = f"{_GOOGLE_AUTH}/bigquery"
    BIGQUERY_READ_ONLY = f"{_GOOGLE_AUTH}/bigquery.readonly"
    PUBSUB = f"{_GOOGLE_AUTH}/pubsub"
    DATASTORE = f"{_GOOGLE_AUTH}/datastore"
    FIREBASE = f"{_GOOGLE_AUTH}/firebase"
    FIREBASE_MESSAGING = f"{_GOOGLE_AUTH}/firebase.messaging"
    DRIVE = f"{_GOOGLE_AUTH}/drive"
    DRIVE_READ_ONLY = f"{_GOOGLE_AUTH}/drive.readonly"
    SPREADSHEETS = f"{_GOOGLE_AUTH}/spreadsheets"
    GMAIL_SEND = f"{_GOOGLE_AUTH}/gmail.send"
    LOGGING_WRITE = f"{_GOOGLE_AUTH}/logging.write"
    MONITORING = f"{_GOOGLE_AUTH}/monitoring"


@dataclass(frozen=True)
class CustomScope:
    """A scope string outside the catalog."""

    value: str


ScopeSelection = Scope | CustomScope | str | Iterable[Scope | CustomScope | str]


def _single(scope: Scope | CustomScope | str) -> str:
    if isinstance(scope, Scope):
        return scope.value
    if isinstance(scope, CustomScope):
        return scope.value
    return scope


def resolve_scope(selection: ScopeSelection) -> str:
    """Resolve a scope selection to the space-separated wire string."""
    if isinstance(selection, (Scope, CustomScope, str)):
        return _single(selection)
    resolved: list[str] = []
    for item in selection:
        value = _single(item)
        if value not in resolved:
            resolved.append(value)
    return " ".join(resolved)


def scope_from_name(name: str) -> Scope | CustomScope:
    """Look up a catalog member by name, falling back to a custom scope."""
    try:
        return Scope[name.upper()]
    except KeyError:
        return CustomScope(name)
