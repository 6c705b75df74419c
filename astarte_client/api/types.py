"""Type definitions for API client authentication."""

from pydantic import BaseModel, ConfigDict

from astarte_client.crypto.types import JWTOptions


class ClientAuth(BaseModel):
    """How an API client obtains its bearer token.

    ``jwt`` is used verbatim when set; otherwise a token is generated from
    ``private_key``, with ``jwt_opts`` overriding issuer, subject and expiry.
    """

    model_config = ConfigDict(frozen=True)

    jwt: str | None = None
    private_key: str | None = None
    jwt_opts: JWTOptions | None = None
