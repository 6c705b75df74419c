"""Tests for the credentials builder and its presets."""

import pytest
from pydantic import ValidationError

from astarte_client.core.errors import InvalidExpiryError
from astarte_client.crypto.credentials import (
    Credentials,
    api_all_access_claim_value,
    appengine_all_access_credentials,
    astartectl_credentials,
    cli_tool_credentials,
    dashboard_credentials,
    housekeeping_all_access_credentials,
    pairing_all_access_credentials,
    realm_management_all_access_credentials,
)
from astarte_client.crypto.types import INFINITY, JWTOptions, Scope

ALL = ".*::.*"


class TestBuilder:
    """Tests for incremental claim building."""

    def test_new_is_empty(self) -> None:
        creds = Credentials.new()
        assert dict(creds.claims) == {}
        assert creds.expiry is None
        assert creds.issuer is None
        assert creds.subject is None

    def test_append_per_scope(self) -> None:
        creds = (
            Credentials.new()
            .append_housekeeping_claim("a")
            .append_realm_management_claim("b")
            .append_pairing_claim("c")
            .append_appengine_claim("d")
            .append_channels_claim("e")
            .append_flow_claim("f")
        )
        assert dict(creds.claims) == {
            Scope.HOUSEKEEPING: ("a",),
            Scope.REALM_MANAGEMENT: ("b",),
            Scope.PAIRING: ("c",),
            Scope.APPENGINE: ("d",),
            Scope.CHANNELS: ("e",),
            Scope.FLOW: ("f",),
        }

    def test_appends_accumulate_duplicates(self) -> None:
        creds = (
            Credentials.new()
            .append_appengine_claim("GET::devices")
            .append_appengine_claim("GET::devices")
            .append_appengine_claim("POST::groups")
        )
        assert dict(creds.claims)[Scope.APPENGINE] == (
            "GET::devices",
            "GET::devices",
            "POST::groups",
        )

    def test_builder_does_not_mutate(self) -> None:
        base = Credentials.new()
        derived = base.append_pairing_claim(ALL).set_issuer("me")
        assert dict(base.claims) == {}
        assert base.issuer is None
        assert dict(derived.claims) == {Scope.PAIRING: (ALL,)}

    def test_frozen(self) -> None:
        creds = Credentials.new()
        with pytest.raises(ValidationError):
            creds.issuer = "x"  # type: ignore[misc]

    def test_claims_cannot_be_changed_in_place(self) -> None:
        creds = housekeeping_all_access_credentials()
        with pytest.raises(TypeError):
            creds.claims[Scope.FLOW] = (ALL,)  # type: ignore[index]
        assert dict(creds.claims) == {Scope.HOUSEKEEPING: (ALL,)}

    def test_hashable(self) -> None:
        assert hash(Credentials.new()) == hash(Credentials.new())
        assert len({dashboard_credentials(), dashboard_credentials()}) == 1

    def test_claims_from_mapping(self) -> None:
        creds = Credentials(claims={"a_ha": [ALL], "a_ch": ["JOIN::.*"]})
        assert creds.claims == (
            (Scope.HOUSEKEEPING, (ALL,)),
            (Scope.CHANNELS, ("JOIN::.*",)),
        )

    def test_unknown_claim_key_in_constructor(self) -> None:
        with pytest.raises(ValidationError):
            Credentials(claims={"a_xyz": [ALL]})

    def test_append_claim_by_wire_key(self) -> None:
        creds = Credentials.new().append_claim("a_f", ALL)
        assert dict(creds.claims) == {Scope.FLOW: (ALL,)}

    def test_unknown_scope_rejected(self) -> None:
        with pytest.raises(ValueError):
            Credentials.new().append_claim("a_xyz", ALL)

    def test_non_string_claim_rejected(self) -> None:
        with pytest.raises(TypeError):
            Credentials.new().append_pairing_claim(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [123, None, b"issuer"])
    def test_non_string_issuer_rejected(self, value: object) -> None:
        with pytest.raises(TypeError):
            Credentials.new().set_issuer(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [123, None, b"subject"])
    def test_non_string_subject_rejected(self, value: object) -> None:
        with pytest.raises(TypeError):
            Credentials.new().set_subject(value)  # type: ignore[arg-type]

    def test_issuer_and_subject_overwrite(self) -> None:
        creds = (
            Credentials.new()
            .set_issuer("first")
            .set_issuer("second")
            .set_subject("a")
            .set_subject("b")
        )
        assert creds.issuer == "second"
        assert creds.subject == "b"

    def test_all_access_value(self) -> None:
        assert api_all_access_claim_value() == ALL


class TestExpiry:
    """Tests for expiry validation."""

    def test_positive_seconds(self) -> None:
        assert Credentials.new().set_expiry(60).expiry == 60

    def test_infinity(self) -> None:
        assert Credentials.new().set_expiry(INFINITY).expiry == INFINITY

    @pytest.mark.parametrize("value", [0, -1, True, 1.5, "60", None])
    def test_invalid_rejected(self, value: object) -> None:
        with pytest.raises(InvalidExpiryError):
            Credentials.new().set_expiry(value)  # type: ignore[arg-type]

    def test_constructor_validates(self) -> None:
        with pytest.raises(ValidationError):
            Credentials(expiry=-5)


class TestPresets:
    """Tests for the all-access presets."""

    def test_housekeeping(self) -> None:
        creds = housekeeping_all_access_credentials()
        assert dict(creds.claims) == {Scope.HOUSEKEEPING: (ALL,)}
        assert creds.expiry == 300

    def test_realm_management(self) -> None:
        creds = realm_management_all_access_credentials()
        assert dict(creds.claims) == {Scope.REALM_MANAGEMENT: (ALL,)}

    def test_pairing(self) -> None:
        creds = pairing_all_access_credentials()
        assert dict(creds.claims) == {Scope.PAIRING: (ALL,)}

    def test_appengine_includes_channels(self) -> None:
        creds = appengine_all_access_credentials()
        assert dict(creds.claims) == {
            Scope.APPENGINE: (ALL,),
            Scope.CHANNELS: ("JOIN::.*", "WATCH::.*"),
        }

    def test_dashboard(self) -> None:
        creds = dashboard_credentials()
        assert dict(creds.claims) == {
            Scope.APPENGINE: (ALL,),
            Scope.REALM_MANAGEMENT: (ALL,),
            Scope.PAIRING: (ALL,),
            Scope.FLOW: (ALL,),
            Scope.HOUSEKEEPING: (ALL,),
            Scope.CHANNELS: ("JOIN::.*", "WATCH::.*"),
        }

    def test_cli_tool(self) -> None:
        creds = cli_tool_credentials()
        assert set(dict(creds.claims)) == {
            Scope.APPENGINE,
            Scope.REALM_MANAGEMENT,
            Scope.PAIRING,
            Scope.FLOW,
        }
        assert astartectl_credentials() == creds

    def test_options_applied(self) -> None:
        creds = pairing_all_access_credentials(
            JWTOptions(issuer="foo", subject="bar", expiry=INFINITY)
        )
        assert creds.issuer == "foo"
        assert creds.subject == "bar"
        assert creds.expiry == INFINITY

    def test_unset_options_leave_fields_empty(self) -> None:
        creds = housekeeping_all_access_credentials(JWTOptions(expiry=60))
        assert creds.issuer is None
        assert creds.subject is None
        assert creds.expiry == 60

    def test_invalid_expiry_option_rejected(self) -> None:
        with pytest.raises(InvalidExpiryError):
            dashboard_credentials(JWTOptions(expiry=0))
