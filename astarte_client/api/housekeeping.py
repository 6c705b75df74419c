"""Client for the Astarte Housekeeping API."""

import httpx

from astarte_client.api.base import ApiClient, join_url
from astarte_client.api.types import ClientAuth
from astarte_client.crypto.credentials import (
    Credentials,
    housekeeping_all_access_credentials,
)
from astarte_client.crypto.types import JWTOptions


class HousekeepingClient(ApiClient):
    """Housekeeping manages realms; it is not scoped to a single realm."""

    def __init__(
        self,
        base_api_url: str,
        auth: ClientAuth,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(join_url(base_api_url, "housekeeping", "v1"), auth, transport)

    def credentials(self, opts: JWTOptions | None) -> Credentials:
        return housekeeping_all_access_credentials(opts)
