"""Validadores por recurso - predicados executados na finalização dos builders.

Uso:
    from square_ox.api.validators import validate_location_creation

    validate_location_creation(body)  # levanta ValidationError se inválido
"""

from square_ox.api.validators.locations import validate_location_creation
from square_ox.errors import ValidationError

__all__ = [
    "ValidationError",
    "validate_location_creation",
]
