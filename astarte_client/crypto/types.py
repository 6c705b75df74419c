"""Type definitions for authorization claims and JWT options."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

CLIENT_VERSION = "0.1.0"
INFINITY: Literal["infinity"] = "infinity"
DEFAULT_EXPIRY = 300
API_ALL_ACCESS_CLAIM_VALUE = ".*::.*"
CHANNELS_JOIN_CLAIM_VALUE = "JOIN::.*"
CHANNELS_WATCH_CLAIM_VALUE = "WATCH::.*"

Expiry = int | Literal["infinity"]


class Scope(StrEnum):
    """Astarte API surfaces, valued by their JWT claim key."""

    HOUSEKEEPING = "a_ha"
    REALM_MANAGEMENT = "a_rma"
    PAIRING = "a_pa"
    APPENGINE = "a_aea"
    CHANNELS = "a_ch"
    FLOW = "a_f"


class SigningAlgorithm(StrEnum):
    """JWS algorithms supported for token signing."""

    ES256 = "ES256"
    ES384 = "ES384"
    RS256 = "RS256"


class KeyPair(BaseModel):
    """A PEM-encoded private key and its public half."""

    private_key_pem: str
    public_key_pem: str


class JWTOptions(BaseModel):
    """Claim overrides accepted by the credential presets."""

    model_config = ConfigDict(frozen=True)

    issuer: str | None = None
    subject: str | None = None
    expiry: Expiry = DEFAULT_EXPIRY
