"""Modelos da Square API: envelopes, objetos de recurso e enums."""

from square_ox.models.enums import Currency, DayOfWeek, LocationStatus, LocationType
from square_ox.models.objects import (
    Address,
    BusinessHours,
    BusinessHoursPeriod,
    Coordinates,
    Location,
    LocationCreationWrapper,
    SquareObject,
    TaxIds,
)
from square_ox.models.request import SquareRequest
from square_ox.models.response import ResponseError, SquareResponse, parse_response_errors

__all__ = [
    "Address",
    "BusinessHours",
    "BusinessHoursPeriod",
    "Coordinates",
    "Currency",
    "DayOfWeek",
    "Location",
    "LocationCreationWrapper",
    "LocationStatus",
    "LocationType",
    "ResponseError",
    "SquareObject",
    "SquareRequest",
    "SquareResponse",
    "TaxIds",
    "parse_response_errors",
]
