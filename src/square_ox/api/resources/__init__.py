"""Accessors por recurso, obtidos a partir do SquareClient."""

from square_ox.api.resources.locations import Locations

__all__ = [
    "Locations",
]
