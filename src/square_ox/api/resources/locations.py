"""Operações de locations da Square API."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from square_ox.api.endpoints import SquareAPI
from square_ox.constants import Verb

if TYPE_CHECKING:
    from square_ox.client import SquareClient
    from square_ox.models.objects import LocationCreationWrapper
    from square_ox.models.response import SquareResponse


def _id_path(location_id: str) -> str:
    # "/", "#" e "?" do id não podem abrir outro segmento ou query
    return f"/{quote(location_id, safe='')}"


class Locations:
    """Accessor de locations ligado a um SquareClient.

    Uso:
        body = await LocationBuilder().name("The Foo Bar").build()
        response = await client.locations().create(body)
    """

    def __init__(self, client: SquareClient) -> None:
        self._client = client

    async def list(self) -> SquareResponse:
        """Lista as locations do seller."""
        return await self._client.request(Verb.GET, SquareAPI.LOCATIONS.endpoint())

    async def create(self, new_location: LocationCreationWrapper) -> SquareResponse:
        """Cria uma location a partir de um body validado pelo LocationBuilder."""
        return await self._client.request(
            Verb.POST,
            SquareAPI.LOCATIONS.endpoint(),
            body=new_location,
        )

    async def update(
        self,
        updated_location: LocationCreationWrapper,
        location_id: str,
    ) -> SquareResponse:
        """Atualiza a location `location_id` (PUT)."""
        return await self._client.request(
            Verb.PUT,
            SquareAPI.LOCATIONS.endpoint(_id_path(location_id)),
            body=updated_location,
        )

    async def retrieve(self, location_id: str) -> SquareResponse:
        return await self._client.request(
            Verb.GET,
            SquareAPI.LOCATIONS.endpoint(_id_path(location_id)),
        )
