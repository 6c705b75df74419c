"""Client for the Astarte Pairing API."""

import httpx

from astarte_client.api.base import ApiClient, join_url
from astarte_client.api.types import ClientAuth
from astarte_client.crypto.credentials import Credentials, pairing_all_access_credentials
from astarte_client.crypto.types import JWTOptions


class PairingClient(ApiClient):
    """Pairing API client for one realm (device registration)."""

    def __init__(
        self,
        base_api_url: str,
        realm_name: str,
        auth: ClientAuth,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.realm_name = realm_name
        base_url = join_url(base_api_url, "pairing", "v1", realm_name)
        super().__init__(base_url, auth, transport)

    def credentials(self, opts: JWTOptions | None) -> Credentials:
        return pairing_all_access_credentials(opts)
