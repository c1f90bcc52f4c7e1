"""Builders de location e address.

Uso:
    body = await (
        LocationBuilder()
        .name("The Foo Bar")
        .address_builder()
            .address_line_1("1 Foo St")
            .locality("Bar City")
            .done()
        .location_type(LocationType.PHYSICAL)
        .build()
    )
"""

from __future__ import annotations

from square_ox.api.payload_builders.base import Builder
from square_ox.api.validators.locations import validate_location_creation
from square_ox.models.enums import Currency, LocationStatus, LocationType
from square_ox.models.objects import (
    Address,
    BusinessHours,
    BusinessHoursPeriod,
    Coordinates,
    Location,
    LocationCreationWrapper,
    TaxIds,
)


class LocationBuilder(Builder[LocationCreationWrapper]):
    """Builder de LocationCreationWrapper.

    Uma location só é válida com `name`. Os setters `add_*` acrescentam
    um item (criando a coleção no primeiro uso); os setters no plural
    substituem a coleção inteira.
    """

    body_type = LocationCreationWrapper

    def _location(self) -> Location:
        return self._open_body().location

    def _validate(self, body: LocationCreationWrapper) -> None:
        validate_location_creation(body)

    def name(self, name: str) -> LocationBuilder:
        self._location().name = name
        return self

    def address(self, address: Address) -> LocationBuilder:
        self._location().address = address
        return self

    def address_builder(self) -> AddressBuilder:
        """Abre um AddressBuilder aninhado; `done()` volta para este builder."""
        self._open_body()
        return AddressBuilder(parent=self, attach=self._attach_address)

    def _attach_address(self, address: Address) -> None:
        self._location().address = address

    def business_email(self, business_email: str) -> LocationBuilder:
        self._location().business_email = business_email
        return self

    def add_business_hours_period(self, period: BusinessHoursPeriod) -> LocationBuilder:
        location = self._location()
        if location.business_hours is None:
            location.business_hours = BusinessHours(periods=[period])
        else:
            location.business_hours.periods.append(period)
        return self

    def business_hours(self, business_hours: BusinessHours) -> LocationBuilder:
        self._location().business_hours = business_hours
        return self

    def business_name(self, business_name: str) -> LocationBuilder:
        self._location().business_name = business_name
        return self

    def add_capability(self, capability: str) -> LocationBuilder:
        location = self._location()
        if location.capabilities is None:
            location.capabilities = [capability]
        else:
            location.capabilities.append(capability)
        return self

    def capabilities(self, capabilities: list[str]) -> LocationBuilder:
        self._location().capabilities = list(capabilities)
        return self

    def coordinates(self, coordinates: Coordinates) -> LocationBuilder:
        self._location().coordinates = coordinates
        return self

    def country(self, country: str) -> LocationBuilder:
        self._location().country = country
        return self

    def currency(self, currency: Currency) -> LocationBuilder:
        self._location().currency = Currency(currency)
        return self

    def description(self, description: str) -> LocationBuilder:
        self._location().description = description
        return self

    def facebook_url(self, facebook_url: str) -> LocationBuilder:
        self._location().facebook_url = facebook_url
        return self

    def full_format_logo_url(self, full_format_logo_url: str) -> LocationBuilder:
        self._location().full_format_logo_url = full_format_logo_url
        return self

    def instagram_username(self, instagram_username: str) -> LocationBuilder:
        self._location().instagram_username = instagram_username
        return self

    def language_code(self, language_code: str) -> LocationBuilder:
        self._location().language_code = language_code
        return self

    def logo_url(self, logo_url: str) -> LocationBuilder:
        self._location().logo_url = logo_url
        return self

    def mcc(self, mcc: str) -> LocationBuilder:
        self._location().mcc = mcc
        return self

    def merchant_id(self, merchant_id: str) -> LocationBuilder:
        self._location().merchant_id = merchant_id
        return self

    def phone_number(self, phone_number: str) -> LocationBuilder:
        self._location().phone_number = phone_number
        return self

    def pos_background_url(self, pos_background_url: str) -> LocationBuilder:
        self._location().pos_background_url = pos_background_url
        return self

    def status(self, status: LocationStatus) -> LocationBuilder:
        self._location().status = LocationStatus(status)
        return self

    def tax_ids(self, tax_ids: TaxIds) -> LocationBuilder:
        self._location().tax_ids = tax_ids
        return self

    def timezone(self, timezone: str) -> LocationBuilder:
        self._location().timezone = timezone
        return self

    def twitter_username(self, twitter_username: str) -> LocationBuilder:
        self._location().twitter_username = twitter_username
        return self

    def location_type(self, location_type: LocationType) -> LocationBuilder:
        self._location().type_name = LocationType(location_type)
        return self

    def website_url(self, website_url: str) -> LocationBuilder:
        self._location().website_url = website_url
        return self


class AddressBuilder(Builder[Address]):
    """Builder de Address; nenhum campo é obrigatório."""

    body_type = Address

    def _set(self, field_name: str, value: str) -> AddressBuilder:
        setattr(self._open_body(), field_name, value)
        return self

    def address_line_1(self, value: str) -> AddressBuilder:
        return self._set("address_line_1", value)

    def address_line_2(self, value: str) -> AddressBuilder:
        return self._set("address_line_2", value)

    def address_line_3(self, value: str) -> AddressBuilder:
        return self._set("address_line_3", value)

    def locality(self, value: str) -> AddressBuilder:
        return self._set("locality", value)

    def sublocality(self, value: str) -> AddressBuilder:
        return self._set("sublocality", value)

    def sublocality_2(self, value: str) -> AddressBuilder:
        return self._set("sublocality_2", value)

    def sublocality_3(self, value: str) -> AddressBuilder:
        return self._set("sublocality_3", value)

    def administrative_district_level_1(self, value: str) -> AddressBuilder:
        return self._set("administrative_district_level_1", value)

    def administrative_district_level_2(self, value: str) -> AddressBuilder:
        return self._set("administrative_district_level_2", value)

    def administrative_district_level_3(self, value: str) -> AddressBuilder:
        return self._set("administrative_district_level_3", value)

    def postal_code(self, value: str) -> AddressBuilder:
        return self._set("postal_code", value)

    def country(self, value: str) -> AddressBuilder:
        return self._set("country", value)

    def first_name(self, value: str) -> AddressBuilder:
        return self._set("first_name", value)

    def last_name(self, value: str) -> AddressBuilder:
        return self._set("last_name", value)
