"""Endpoints da Square API.

Cada família de recurso tem um prefixo de path fixo; o descritor
concatena esse prefixo com o sufixo informado pelo chamador
(normalmente vazio ou `/{resource_id}`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from square_ox.constants import SQUARE_API_VERSION_PATH


class SquareAPI(StrEnum):
    """Famílias de recurso suportadas, com o prefixo de path de cada uma."""

    PAYMENTS = "payments"
    BOOKINGS = "bookings"
    LOCATIONS = "locations"
    CATALOG = "catalog"
    CUSTOMERS = "customers"
    CARDS = "cards"
    CHECKOUT = "online-checkout"
    INVENTORY = "inventory"
    SITES = "sites"
    TERMINALS = "terminals"
    ORDERS = "orders"

    def endpoint(self, path: str = "") -> Endpoint:
        """Atalho: `SquareAPI.LOCATIONS.endpoint("/abc123")`."""
        return Endpoint(self, path)


@dataclass(frozen=True)
class Endpoint:
    """Família de recurso + sufixo de path."""

    family: SquareAPI
    path: str = ""

    def render(self) -> str:
        """Path relativo completo, ex: `/v2/locations/abc123`."""
        return f"/{SQUARE_API_VERSION_PATH}/{self.family.value}{self.path}"

    def __str__(self) -> str:
        return self.render()
