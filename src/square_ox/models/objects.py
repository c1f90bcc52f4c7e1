"""Objetos da Square API usados como body de requisição.

Todos os campos são opcionais: a obrigatoriedade é decidida pelos
validadores de cada recurso, não pelo modelo.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from square_ox.models.enums import Currency, DayOfWeek, LocationStatus, LocationType


class SquareObject(BaseModel):
    """Base dos objetos Square: aceita alias e campos extras da API."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> dict:
        """Serializa no formato JSON da Square, omitindo campos ausentes."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Address(SquareObject):
    address_line_1: str | None = None
    address_line_2: str | None = None
    address_line_3: str | None = None
    locality: str | None = None
    sublocality: str | None = None
    sublocality_2: str | None = None
    sublocality_3: str | None = None
    administrative_district_level_1: str | None = None
    administrative_district_level_2: str | None = None
    administrative_district_level_3: str | None = None
    postal_code: str | None = None
    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class Coordinates(SquareObject):
    latitude: float | None = None
    longitude: float | None = None


class TaxIds(SquareObject):
    """Identificadores fiscais por país (UE, França, Espanha)."""

    eu_vat: str | None = None
    fr_siret: str | None = None
    fr_naf: str | None = None
    es_nif: str | None = None


class BusinessHoursPeriod(SquareObject):
    """Período de funcionamento; horários locais no formato HH:MM:SS."""

    day_of_week: DayOfWeek | None = None
    start_local_time: str | None = None
    end_local_time: str | None = None


class BusinessHours(SquareObject):
    periods: list[BusinessHoursPeriod] = Field(default_factory=list)


class Location(SquareObject):
    """Location de um seller na Square.

    `type_name` é serializado como `type` para não sombrear o builtin.
    """

    id: str | None = None
    name: str | None = None
    address: Address | None = None
    timezone: str | None = None
    capabilities: list[str] | None = None
    status: LocationStatus | None = None
    created_at: str | None = None
    merchant_id: str | None = None
    country: str | None = None
    language_code: str | None = None
    currency: Currency | None = None
    phone_number: str | None = None
    business_name: str | None = None
    type_name: LocationType | None = Field(default=None, alias="type")
    website_url: str | None = None
    business_hours: BusinessHours | None = None
    business_email: str | None = None
    description: str | None = None
    twitter_username: str | None = None
    instagram_username: str | None = None
    facebook_url: str | None = None
    coordinates: Coordinates | None = None
    logo_url: str | None = None
    pos_background_url: str | None = None
    mcc: str | None = None
    full_format_logo_url: str | None = None
    tax_ids: TaxIds | None = None


class LocationCreationWrapper(SquareObject):
    """Envelope `{"location": {...}}` exigido por create/update de locations."""

    location: Location = Field(default_factory=Location)
