"""Client for the Astarte AppEngine API."""

import httpx

from astarte_client.api.base import ApiClient, authorization_headers, join_url
from astarte_client.api.types import ClientAuth
from astarte_client.crypto.credentials import (
    Credentials,
    appengine_all_access_credentials,
)
from astarte_client.crypto.types import JWTOptions


class AppEngineClient(ApiClient):
    """AppEngine API client for one realm.

    Without a static JWT, every ``http_client()`` call signs a fresh token so
    long-lived clients never send an expired one.
    """

    def __init__(
        self,
        base_api_url: str,
        realm_name: str,
        auth: ClientAuth,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.realm_name = realm_name
        base_url = join_url(base_api_url, "appengine", "v1", realm_name)
        super().__init__(base_url, auth, transport)

    def credentials(self, opts: JWTOptions | None) -> Credentials:
        return appengine_all_access_credentials(opts)

    def http_client(self) -> httpx.Client:
        if self._auth.jwt is None:
            self._http.headers.update(
                authorization_headers(self._fetch_or_generate_jwt())
            )
        return self._http
