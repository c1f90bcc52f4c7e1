"""Testes para square_ox.api.validators."""

from __future__ import annotations

import pytest

from square_ox.api.validators import ValidationError, validate_location_creation
from square_ox.errors import SquareError
from square_ox.models.objects import Location, LocationCreationWrapper


def test_location_with_name_is_valid() -> None:
    body = LocationCreationWrapper(location=Location(name="The Foo Bar"))
    assert validate_location_creation(body) is None


@pytest.mark.parametrize("name", [None, "", "  \t"])
def test_location_without_name_is_invalid(name: str | None) -> None:
    body = LocationCreationWrapper(location=Location(name=name, facebook_url="fb"))

    with pytest.raises(ValidationError) as exc_info:
        validate_location_creation(body)

    assert isinstance(exc_info.value, SquareError)
    assert exc_info.value.missing_fields == ("name",)
