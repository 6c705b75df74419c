"""Client for the Astarte Realm Management API.

Realm Management is the main mechanism to configure a realm: it installs and
manages interfaces, triggers and the realm configuration itself.
"""

import httpx

from astarte_client.api.base import ApiClient, join_url
from astarte_client.api.types import ClientAuth
from astarte_client.crypto.credentials import (
    Credentials,
    realm_management_all_access_credentials,
)
from astarte_client.crypto.types import JWTOptions


class RealmManagementClient(ApiClient):
    """Realm Management API client for one realm."""

    def __init__(
        self,
        base_api_url: str,
        realm_name: str,
        auth: ClientAuth,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.realm_name = realm_name
        base_url = join_url(base_api_url, "realmmanagement", "v1", realm_name)
        super().__init__(base_url, auth, transport)

    def credentials(self, opts: JWTOptions | None) -> Credentials:
        return realm_management_all_access_credentials(opts)
