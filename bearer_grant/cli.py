"""Command line entry point: request a token or generate a signing key."""

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from bearer_grant.core.errors import TokenGenerationError
from bearer_grant.core.logging import configure_logging
from bearer_grant.core.settings import BearerGrantSettings
from bearer_grant.credentials.scopes import scope_from_name
from bearer_grant.crypto.keys import generate_rsa_keypair
from bearer_grant.oauth.auth_config import AuthConfig


def parse_args(
    settings: BearerGrantSettings, argv: list[str] | None = None
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bearer-grant",
        description="Obtain OAuth2 access tokens with a service account key.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    token = commands.add_parser("token", help="Request and print an access token.")
    token.add_argument(
        "--credentials",
        default=settings.credentials_file or None,
        required=not settings.credentials_file,
        help="Path to the service account JSON key file.",
    )
    token.add_argument(
        "--scope",
        action="append",
        help="Catalog name (e.g. CLOUD_VISION) or raw scope string. Repeatable.",
    )
    token.add_argument(
        "--lifetime",
        type=int,
        default=settings.default_lifetime,
        help=f"Assertion lifetime in seconds (default: {settings.default_lifetime}).",
    )

    keygen = commands.add_parser("keygen", help="Write a new RSA keypair as PEM.")
    keygen.add_argument(
        "--out-dir",
        type=Path,
        default=Path("."),
        help="Directory for private.pem and public.pem (default: .).",
    )
    return parser.parse_args(argv)


async def _request_token(
    credentials: str, scopes: list[str], lifetime: int
) -> str:
    config = AuthConfig.from_file(
        credentials, [scope_from_name(name) for name in scopes]
    )
    return await config.generate_auth_token(lifetime)


def _write_keypair(out_dir: Path) -> None:
    keypair = generate_rsa_keypair()
    out_dir.mkdir(parents=True, exist_ok=True)
    private_path = out_dir / "private.pem"
    private_path.write_text(keypair.private_key_pem)
    private_path.chmod(0o600)
    (out_dir / "public.pem").write_text(keypair.public_key_pem)


def main(argv: list[str] | None = None) -> int:
    try:
        settings = BearerGrantSettings()
    except ValidationError as exc:
        print(f"Invalid BEARER_GRANT_* settings: {exc}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level, json=settings.log_json)
    args = parse_args(settings, argv)

    if args.command == "keygen":
        _write_keypair(args.out_dir)
        print(f"Wrote private.pem and public.pem to {args.out_dir}")
        return 0

    scopes = args.scope or [settings.default_scope]
    try:
        token = asyncio.run(_request_token(args.credentials, scopes, args.lifetime))
    except TokenGenerationError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
