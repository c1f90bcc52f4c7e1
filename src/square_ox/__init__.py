"""square_ox - cliente tipado e assíncrono para a Square API.

Uso:
    from square_ox import SquareClient, LocationBuilder

    client = SquareClient("token").production()
    body = await LocationBuilder().name("The Foo Bar").build()
    response = await client.locations().create(body)
"""

from square_ox.api.endpoints import Endpoint, SquareAPI
from square_ox.api.payload_builders import AddressBuilder, Builder, LocationBuilder
from square_ox.client import SquareClient
from square_ox.constants import ClientMode, Verb
from square_ox.errors import (
    BuilderConsumedError,
    DeserializationError,
    HeaderBuildError,
    SquareApiError,
    SquareError,
    TransportError,
    ValidationError,
)
from square_ox.models import SquareRequest, SquareResponse

__all__ = [
    "AddressBuilder",
    "Builder",
    "BuilderConsumedError",
    "ClientMode",
    "DeserializationError",
    "Endpoint",
    "HeaderBuildError",
    "LocationBuilder",
    "SquareAPI",
    "SquareApiError",
    "SquareClient",
    "SquareError",
    "SquareRequest",
    "SquareResponse",
    "TransportError",
    "ValidationError",
    "Verb",
]
