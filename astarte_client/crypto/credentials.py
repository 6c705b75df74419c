"""Scoped authorization credentials and their all-access presets.

A ``Credentials`` value describes what a token may do (one list of
``<verb>::<resource>`` regular expressions per Astarte API surface) and how
long it lives. Values are immutable: every builder method returns a new copy.

See https://docs.astarte-platform.org/latest/070-auth.html for the meaning of
the authorization claims.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from astarte_client.core.errors import InvalidExpiryError
from astarte_client.crypto.types import (
    API_ALL_ACCESS_CLAIM_VALUE,
    CHANNELS_JOIN_CLAIM_VALUE,
    CHANNELS_WATCH_CLAIM_VALUE,
    INFINITY,
    Expiry,
    JWTOptions,
    Scope,
)


def _check_str(field: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _check_expiry(expiry: object) -> Expiry:
    """Accept infinity or a positive integer number of seconds."""
    if expiry == INFINITY:
        return INFINITY
    if isinstance(expiry, bool) or not isinstance(expiry, int):
        raise InvalidExpiryError(f"Expiry must be a positive integer, got {expiry!r}")
    if expiry <= 0:
        raise InvalidExpiryError(f"Expiry must be a positive integer, got {expiry}")
    return expiry


class Credentials(BaseModel):
    """Authorization claims plus issuer, subject and expiry policy.

    ``claims`` holds (scope, patterns) pairs in first-append order; pass it to
    ``dict()`` for lookups.
    """

    model_config = ConfigDict(frozen=True)

    claims: tuple[tuple[Scope, tuple[str, ...]], ...] = ()
    expiry: Expiry | None = None
    issuer: str | None = None
    subject: str | None = None

    @field_validator("claims", mode="before")
    @classmethod
    def _claims_as_pairs(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @field_validator("expiry", mode="before")
    @classmethod
    def _validate_expiry(cls, value: object) -> Expiry | None:
        if value is None:
            return None
        return _check_expiry(value)

    @classmethod
    def new(cls) -> "Credentials":
        """Return empty credentials."""
        return cls()

    def append_claim(self, scope: Scope | str, claim: str) -> "Credentials":
        """Append a claim pattern to the given scope."""
        scope = Scope(scope)
        if not isinstance(claim, str):
            raise TypeError(f"Claim must be a string, got {type(claim).__name__}")
        claims = dict(self.claims)
        claims[scope] = (*claims.get(scope, ()), claim)
        return self.model_copy(update={"claims": tuple(claims.items())})

    def append_housekeeping_claim(self, claim: str) -> "Credentials":
        """Append a claim for the Housekeeping API."""
        return self.append_claim(Scope.HOUSEKEEPING, claim)

    def append_realm_management_claim(self, claim: str) -> "Credentials":
        """Append a claim for the Realm Management API."""
        return self.append_claim(Scope.REALM_MANAGEMENT, claim)

    def append_pairing_claim(self, claim: str) -> "Credentials":
        """Append a claim for the Pairing API."""
        return self.append_claim(Scope.PAIRING, claim)

    def append_appengine_claim(self, claim: str) -> "Credentials":
        """Append a claim for the AppEngine API."""
        return self.append_claim(Scope.APPENGINE, claim)

    def append_channels_claim(self, claim: str) -> "Credentials":
        """Append a claim for Astarte Channels."""
        return self.append_claim(Scope.CHANNELS, claim)

    def append_flow_claim(self, claim: str) -> "Credentials":
        """Append a claim for the Flow API."""
        return self.append_claim(Scope.FLOW, claim)

    def set_expiry(self, expiry: Expiry) -> "Credentials":
        """Set the expiry used to compute the "exp" claim.

        ``INFINITY`` omits the claim; a positive integer is added to the
        current time when the token is generated.
        """
        return self.model_copy(update={"expiry": _check_expiry(expiry)})

    def set_issuer(self, issuer: str) -> "Credentials":
        """Set the "iss" claim."""
        return self.model_copy(update={"issuer": _check_str("Issuer", issuer)})

    def set_subject(self, subject: str) -> "Credentials":
        """Set the "sub" claim."""
        return self.model_copy(update={"subject": _check_str("Subject", subject)})


def api_all_access_claim_value() -> str:
    """Return the regular expression that allows any operation."""
    return API_ALL_ACCESS_CLAIM_VALUE


def _finish(credentials: Credentials, opts: JWTOptions | None) -> Credentials:
    """Apply issuer, subject and expiry from the options bundle."""
    opts = opts or JWTOptions()
    if opts.issuer is not None:
        credentials = credentials.set_issuer(opts.issuer)
    if opts.subject is not None:
        credentials = credentials.set_subject(opts.subject)
    return credentials.set_expiry(opts.expiry)


def _with_channels(credentials: Credentials) -> Credentials:
    return credentials.append_channels_claim(
        CHANNELS_JOIN_CLAIM_VALUE
    ).append_channels_claim(CHANNELS_WATCH_CLAIM_VALUE)


def housekeeping_all_access_credentials(opts: JWTOptions | None = None) -> Credentials:
    """Credentials allowing any operation on the Housekeeping API."""
    credentials = Credentials.new().append_housekeeping_claim(API_ALL_ACCESS_CLAIM_VALUE)
    return _finish(credentials, opts)


def realm_management_all_access_credentials(
    opts: JWTOptions | None = None,
) -> Credentials:
    """Credentials allowing any operation on the Realm Management API."""
    credentials = Credentials.new().append_realm_management_claim(
        API_ALL_ACCESS_CLAIM_VALUE
    )
    return _finish(credentials, opts)


def pairing_all_access_credentials(opts: JWTOptions | None = None) -> Credentials:
    """Credentials allowing any operation on the Pairing API."""
    credentials = Credentials.new().append_pairing_claim(API_ALL_ACCESS_CLAIM_VALUE)
    return _finish(credentials, opts)


def appengine_all_access_credentials(opts: JWTOptions | None = None) -> Credentials:
    """Credentials allowing any operation on AppEngine and Astarte Channels."""
    credentials = Credentials.new().append_appengine_claim(API_ALL_ACCESS_CLAIM_VALUE)
    return _finish(_with_channels(credentials), opts)


def dashboard_credentials(opts: JWTOptions | None = None) -> Credentials:
    """Superuser credentials for an operator dashboard.

    Grants every operation on AppEngine, Realm Management, Pairing, Flow and
    Housekeeping, plus joining and watching Astarte Channels rooms.
    """
    credentials = (
        Credentials.new()
        .append_appengine_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_realm_management_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_pairing_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_flow_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_housekeeping_claim(API_ALL_ACCESS_CLAIM_VALUE)
    )
    return _finish(_with_channels(credentials), opts)


def cli_tool_credentials(opts: JWTOptions | None = None) -> Credentials:
    """Credentials for astartectl: AppEngine, Realm Management, Pairing, Flow."""
    credentials = (
        Credentials.new()
        .append_appengine_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_realm_management_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_pairing_claim(API_ALL_ACCESS_CLAIM_VALUE)
        .append_flow_claim(API_ALL_ACCESS_CLAIM_VALUE)
    )
    return _finish(credentials, opts)


astartectl_credentials = cli_tool_credentials
