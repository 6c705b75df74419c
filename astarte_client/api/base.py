"""Bearer token resolution and HTTP client construction shared by all APIs."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Self

import httpx

from astarte_client.api.types import ClientAuth
from astarte_client.core.errors import MissingCredentialInputError
from astarte_client.crypto.credentials import Credentials
from astarte_client.crypto.jwt_signer import to_jwt
from astarte_client.crypto.types import DEFAULT_EXPIRY, JWTOptions

logger = logging.getLogger(__name__)

JWT_EXPIRY = DEFAULT_EXPIRY

CredentialsPreset = Callable[[JWTOptions | None], Credentials]


def fetch_or_generate_jwt(auth: ClientAuth, preset: CredentialsPreset) -> str:
    """Return the static JWT, or sign one from the private key."""
    if auth.jwt is not None:
        return auth.jwt
    if auth.private_key is None:
        raise MissingCredentialInputError("Either jwt or private_key is required")
    opts = auth.jwt_opts or JWTOptions(expiry=JWT_EXPIRY)
    return to_jwt(preset(opts), auth.private_key)


def authorization_headers(token: str) -> dict[str, str]:
    """Astarte expects "Bearer: " followed by the token."""
    return {"Authorization": f"Bearer: {token}"}


def join_url(base_api_url: str, *segments: str) -> str:
    """Join path segments onto the API base URL."""
    parts = [base_api_url.rstrip("/")]
    parts.extend(segment.strip("/") for segment in segments)
    return "/".join(parts)


class ApiClient(ABC):
    """Base for the Astarte API clients.

    Subclasses set the base URL and choose which all-access credentials the
    generated token carries.
    """

    def __init__(
        self,
        base_url: str,
        auth: ClientAuth,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._auth = auth
        token = self._fetch_or_generate_jwt()
        self._http = httpx.Client(
            base_url=base_url,
            headers=authorization_headers(token),
            transport=transport,
        )
        logger.debug("Created %s for %s", type(self).__name__, base_url)

    @abstractmethod
    def credentials(self, opts: JWTOptions | None) -> Credentials:
        """All-access credentials for this API surface."""

    def _fetch_or_generate_jwt(self) -> str:
        return fetch_or_generate_jwt(self._auth, self.credentials)

    def http_client(self) -> httpx.Client:
        """Return the HTTP client bound to this API's base URL."""
        return self._http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
