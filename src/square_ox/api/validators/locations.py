"""Validadores para locations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from square_ox.errors import ValidationError

if TYPE_CHECKING:
    from square_ox.models.objects import LocationCreationWrapper


def validate_location_creation(body: LocationCreationWrapper) -> None:
    """Valida location para create/update.

    Raises:
        ValidationError: Se `name` ausente ou em branco
    """
    name = body.location.name
    if name is None or not name.strip():
        raise ValidationError("invalid", missing_fields=("name",))
