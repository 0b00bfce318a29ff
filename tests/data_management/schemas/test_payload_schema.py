"""Tests for request/verdict schemas and their invariants."""

import pytest
from pydantic import ValidationError

from stamp_system.data_management.schemas import (
    CheckResponse,
    Passport,
    RequestPayload,
    Stamp,
    VerifiedPayload,
)


class TestRequestPayload:
    def test_defaults(self) -> None:
        payload = RequestPayload(address="0xabc")
        assert payload.type == ""
        assert payload.types == []
        assert payload.version == "0.0.0"
        assert payload.rpc_url is None

    def test_immutable(self) -> None:
        payload = RequestPayload(address="0xabc")
        with pytest.raises(ValidationError):
            payload.address = "0xdef"

    def test_address_required(self) -> None:
        with pytest.raises(ValidationError):
            RequestPayload()


class TestVerifiedPayload:
    def test_valid_with_record(self) -> None:
        payload = VerifiedPayload(valid=True, record={"ens": "a.eth"})
        assert payload.errors == []

    def test_invalid_with_errors(self) -> None:
        payload = VerifiedPayload(valid=False, errors=["nope"])
        assert payload.record is None

    def test_valid_with_errors_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot carry errors"):
            VerifiedPayload(valid=True, errors=["nope"])

    def test_invalid_with_record_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot carry a record"):
            VerifiedPayload(valid=False, record={"ens": "a.eth"})

    def test_json_shape(self) -> None:
        payload = VerifiedPayload(valid=False, errors=["nope"])
        assert payload.model_dump() == {"valid": False, "errors": ["nope"], "record": None}


class TestCheckResponse:
    def test_optional_fields(self) -> None:
        response = CheckResponse.model_validate({"type": "Ens", "valid": True})
        assert response.error is None
        assert response.code is None


class TestPassport:
    def test_provider_types(self) -> None:
        passport = Passport(stamps=[Stamp(provider="Ens"), Stamp(provider="Ens")])
        assert passport.provider_types() == {"Ens"}
