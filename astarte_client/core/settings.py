"""Client settings loaded from environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from astarte_client.api.types import ClientAuth
from astarte_client.crypto.types import DEFAULT_EXPIRY, Expiry, JWTOptions


class ClientSettings(BaseSettings):
    """Connection and authentication settings for the Astarte API clients."""

    model_config = SettingsConfigDict(env_prefix="ASTARTE_")

    base_api_url: str = "http://localhost:4000"
    realm_name: str = ""
    jwt: str | None = None
    private_key_path: Path | None = None
    jwt_issuer: str | None = None
    jwt_subject: str | None = None
    jwt_expiry: Expiry = DEFAULT_EXPIRY

    def jwt_options(self) -> JWTOptions:
        """Bundle the JWT claim overrides."""
        return JWTOptions(
            issuer=self.jwt_issuer,
            subject=self.jwt_subject,
            expiry=self.jwt_expiry,
        )

    def to_auth(self) -> ClientAuth:
        """Build client auth options, reading the private key file if set."""
        private_key = None
        if self.private_key_path is not None:
            private_key = self.private_key_path.read_text(encoding="utf-8")
        return ClientAuth(
            jwt=self.jwt,
            private_key=private_key,
            jwt_opts=self.jwt_options(),
        )
