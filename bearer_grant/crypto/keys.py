"""RSA signing key generation and public key derivation."""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from bearer_grant.core.errors import SigningError
from bearer_grant.crypto.types import RSAKeyPair

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


def generate_rsa_keypair() -> RSAKeyPair:
    """Generate a new RSA-2048 keypair for assertion signing."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    return RSAKeyPair(
        private_key_pem=private_pem,
        public_key_pem=_public_pem(private_key.public_key()),
    )


def load_rsa_private_key(private_key_pem: str) -> rsa.RSAPrivateKey:
    """Load an unencrypted PEM private key and require it to be RSA."""
    try:
        loaded = serialization.load_pem_private_key(
            private_key_pem.encode(), password=None
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SigningError("Private key is not a valid unencrypted PEM key") from exc
    if not isinstance(loaded, rsa.RSAPrivateKey):
        raise SigningError(
            f"Private key is {type(loaded).__name__}, RS256 requires an RSA key"
        )
    return loaded


def public_key_from_private(private_key_pem: str) -> str:
    """Derive the PEM public key that verifies signatures of this key."""
    return _public_pem(load_rsa_private_key(private_key_pem).public_key())


def _public_pem(public_key: rsa.RSAPublicKey) -> str:
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
