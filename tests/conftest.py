"""Shared test fixtures for astarte-client."""

from typing import Any

import jwt
import pytest

from astarte_client.crypto.keys import generate_keypair
from astarte_client.crypto.types import KeyPair, SigningAlgorithm


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ASTARTE_* variables out of settings tests."""
    for name in (
        "ASTARTE_BASE_API_URL",
        "ASTARTE_REALM_NAME",
        "ASTARTE_JWT",
        "ASTARTE_PRIVATE_KEY_PATH",
        "ASTARTE_JWT_ISSUER",
        "ASTARTE_JWT_SUBJECT",
        "ASTARTE_JWT_EXPIRY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def es256_keypair() -> KeyPair:
    """A secp256r1 keypair."""
    return generate_keypair(SigningAlgorithm.ES256)


@pytest.fixture(scope="session")
def es384_keypair() -> KeyPair:
    """A secp384r1 keypair."""
    return generate_keypair(SigningAlgorithm.ES384)


@pytest.fixture(scope="session")
def rsa_keypair() -> KeyPair:
    """An RSA-2048 keypair."""
    return generate_keypair(SigningAlgorithm.RS256)


def verify(token: str, keypair: KeyPair, algorithm: str = "ES256") -> dict[str, Any]:
    """Decode a token, checking its signature but not its expiry."""
    return jwt.decode(
        token,
        keypair.public_key_pem,
        algorithms=[algorithm],
        options={"verify_exp": False},
    )


@pytest.fixture
def decode_token() -> Any:
    """Return a helper that verifies and decodes a signed token."""
    return verify
