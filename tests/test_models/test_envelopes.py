"""Testes para os envelopes SquareRequest e SquareResponse."""

from __future__ import annotations

import pytest

from square_ox.api.endpoints import SquareAPI
from square_ox.constants import Verb
from square_ox.errors import SquareApiError
from square_ox.models import (
    Location,
    LocationCreationWrapper,
    ResponseError,
    SquareRequest,
    SquareResponse,
    parse_response_errors,
)


class TestSquareRequest:
    """Serialização do body e path."""

    def test_path_from_endpoint(self) -> None:
        request = SquareRequest(Verb.GET, SquareAPI.LOCATIONS.endpoint("/abc123"))
        assert request.path == "/v2/locations/abc123"

    def test_no_body(self) -> None:
        assert SquareRequest(Verb.GET, SquareAPI.LOCATIONS.endpoint()).json_body() is None

    def test_model_body_uses_alias_and_skips_none(self) -> None:
        body = LocationCreationWrapper(location=Location(name="Foo", type_name="MOBILE"))
        request = SquareRequest(Verb.POST, SquareAPI.LOCATIONS.endpoint(), body=body)

        assert request.json_body() == {"location": {"name": "Foo", "type": "MOBILE"}}

    def test_mapping_body_passthrough(self) -> None:
        body = {"query": {"filter": {}}}
        request = SquareRequest(Verb.POST, SquareAPI.CUSTOMERS.endpoint("/search"), body=body)

        assert request.json_body() is body


class TestSquareResponse:
    """Helpers do envelope de resposta."""

    def test_success_helpers(self) -> None:
        response = SquareResponse(200, {"locations": [], "cursor": "next"})

        assert response.is_success
        assert response.errors == []
        assert response.cursor == "next"
        assert "locations" in response
        assert response.get("missing", "default") == "default"
        assert response.raise_for_errors() is response

    def test_errors_parsed(self) -> None:
        response = SquareResponse(
            400,
            {
                "errors": [
                    {
                        "category": "INVALID_REQUEST_ERROR",
                        "code": "MISSING_REQUIRED_PARAMETER",
                        "detail": "Missing name",
                        "field": "location.name",
                    }
                ]
            },
        )

        assert not response.is_success
        assert response.errors == [
            ResponseError(
                category="INVALID_REQUEST_ERROR",
                code="MISSING_REQUIRED_PARAMETER",
                detail="Missing name",
                field="location.name",
            )
        ]

    def test_raise_for_errors(self) -> None:
        response = SquareResponse(401, {"errors": [{"category": "AUTHENTICATION_ERROR", "code": "UNAUTHORIZED"}]})

        with pytest.raises(SquareApiError, match="UNAUTHORIZED") as exc_info:
            response.raise_for_errors()

        assert exc_info.value.stage == "api"

    def test_non_2xx_without_errors_is_not_success(self) -> None:
        assert not SquareResponse(500, {}).is_success

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            SquareResponse(200, {})["location"]


class TestParseResponseErrors:
    """Tolerância a formatos inesperados em `errors`."""

    @pytest.mark.parametrize("payload", [{}, {"errors": None}, {"errors": "boom"}, {"errors": []}])
    def test_no_errors(self, payload: dict) -> None:
        assert parse_response_errors(payload) == []

    def test_skips_non_dict_items_and_fills_defaults(self) -> None:
        errors = parse_response_errors({"errors": ["x", {}]})

        assert errors == [ResponseError(category="UNKNOWN", code="UNKNOWN")]
