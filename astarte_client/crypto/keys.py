"""Signing keypair generation for realms and JWT issuers."""

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from astarte_client.crypto.jwt_signer import load_private_key
from astarte_client.crypto.types import KeyPair, SigningAlgorithm

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537

_EC_CURVES = {
    SigningAlgorithm.ES256: ec.SECP256R1,
    SigningAlgorithm.ES384: ec.SECP384R1,
}


def generate_keypair(algorithm: SigningAlgorithm = SigningAlgorithm.ES256) -> KeyPair:
    """Generate a keypair usable with ``to_jwt`` for the given algorithm.

    The public half is what a realm is created with; the private half signs
    the tokens presented to that realm's APIs.
    """
    if algorithm == SigningAlgorithm.RS256:
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT,
            key_size=RSA_KEY_SIZE,
        )
    else:
        private_key = ec.generate_private_key(_EC_CURVES[algorithm]())
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    return KeyPair(private_key_pem=private_pem, public_key_pem=public_key_pem(private_pem))


def public_key_pem(private_key_pem: str) -> str:
    """Derive the SubjectPublicKeyInfo PEM of a private key."""
    return (
        load_private_key(private_key_pem)
        .public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
