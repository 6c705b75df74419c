"""Exception hierarchy for credential generation and API access."""

from typing import Any


class AstarteClientError(Exception):
    """Base class for every error raised by this library."""


class MissingCredentialInputError(AstarteClientError):
    """Neither a JWT nor a private key was supplied to a client."""


class CredentialError(AstarteClientError):
    """Failure while building or signing credentials."""


class KeyParseError(CredentialError):
    """The PEM does not decode to a private key."""


class UnsupportedKeyError(CredentialError):
    """The private key type or curve cannot be used for signing."""


class SigningError(CredentialError):
    """The signing primitive failed on a classified key."""


class InvalidExpiryError(CredentialError, ValueError):
    """Expiry is neither a positive number of seconds nor infinity."""


class APIError(AstarteClientError):
    """Non-success HTTP response from an Astarte API."""

    def __init__(self, status: int, response: Any) -> None:
        super().__init__(f"Astarte API returned HTTP {status}")
        self.status = status
        self.response = response
