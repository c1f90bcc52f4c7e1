"""Builders de body para a Square API.

Padrão acumular-e-validar: setters encadeáveis preenchem o body e
`build()` valida antes de o body chegar ao dispatcher.
"""

from square_ox.api.payload_builders.base import Builder
from square_ox.api.payload_builders.locations import AddressBuilder, LocationBuilder

__all__ = [
    "AddressBuilder",
    "Builder",
    "LocationBuilder",
]
