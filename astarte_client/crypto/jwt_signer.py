"""JWT generation from credentials and an arbitrary PEM private key."""

from datetime import UTC, datetime
from typing import Any

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from astarte_client.core.errors import KeyParseError, SigningError, UnsupportedKeyError
from astarte_client.crypto.credentials import Credentials
from astarte_client.crypto.types import (
    CLIENT_VERSION,
    DEFAULT_EXPIRY,
    INFINITY,
    SigningAlgorithm,
)

DEFAULT_ISSUER = f"Astarte Client Python v{CLIENT_VERSION}"

_EC_CURVE_ALGORITHMS = {
    ec.SECP256R1.name: SigningAlgorithm.ES256,
    ec.SECP384R1.name: SigningAlgorithm.ES384,
}


def load_private_key(private_key_pem: str | bytes) -> PrivateKeyTypes:
    """Parse an unencrypted PEM private key."""
    data = (
        private_key_pem.encode() if isinstance(private_key_pem, str) else private_key_pem
    )
    try:
        return serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyParseError("Not a valid PEM private key") from exc


def key_algorithm(key: PrivateKeyTypes) -> SigningAlgorithm:
    """Pick the signing algorithm matching the key type and curve."""
    if isinstance(key, ec.EllipticCurvePrivateKey):
        algorithm = _EC_CURVE_ALGORITHMS.get(key.curve.name)
        if algorithm is None:
            raise UnsupportedKeyError(f"Unsupported EC curve: {key.curve.name}")
        return algorithm
    if isinstance(key, rsa.RSAPrivateKey):
        return SigningAlgorithm.RS256
    raise UnsupportedKeyError(f"Unsupported private key type: {type(key).__name__}")


def signing_algorithm(private_key_pem: str | bytes) -> SigningAlgorithm:
    """Return the algorithm that ``to_jwt`` would use for this PEM."""
    return key_algorithm(load_private_key(private_key_pem))


def build_claims(credentials: Credentials, now: int) -> dict[str, Any]:
    """Merge authorization claims with the registered JWT claims."""
    claims: dict[str, Any] = {
        scope.value: list(patterns) for scope, patterns in credentials.claims
    }
    claims["iss"] = credentials.issuer if credentials.issuer is not None else DEFAULT_ISSUER
    if credentials.subject is not None:
        claims["sub"] = credentials.subject
    if credentials.expiry is None:
        claims["exp"] = now + DEFAULT_EXPIRY
    elif credentials.expiry != INFINITY:
        claims["exp"] = now + credentials.expiry
    claims["iat"] = now
    return claims


def to_jwt(credentials: Credentials, private_key_pem: str | bytes) -> str:
    """Generate a JWT for the credentials, signed with the private key."""
    key = load_private_key(private_key_pem)
    algorithm = key_algorithm(key)
    now = int(datetime.now(UTC).timestamp())
    payload = build_claims(credentials, now)
    try:
        return jwt.encode(payload, key, algorithm=algorithm.value)
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise SigningError(f"Failed to sign JWT with {algorithm.value}") from exc
