"""Enums de domínio da Square API usados nos objetos de recurso."""

from __future__ import annotations

from enum import StrEnum


class LocationStatus(StrEnum):
    """Status de uma location."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class LocationType(StrEnum):
    """Tipo de location (endereço fixo ou móvel)."""

    PHYSICAL = "PHYSICAL"
    MOBILE = "MOBILE"


class DayOfWeek(StrEnum):
    """Dia da semana usado em períodos de funcionamento."""

    SUN = "SUN"
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"


class Currency(StrEnum):
    """Códigos ISO 4217 aceitos pela Square."""

    AED = "AED"
    ARS = "ARS"
    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CZK = "CZK"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    JPY = "JPY"
    KRW = "KRW"
    MXN = "MXN"
    MYR = "MYR"
    NOK = "NOK"
    NZD = "NZD"
    PEN = "PEN"
    PHP = "PHP"
    PLN = "PLN"
    SAR = "SAR"
    SEK = "SEK"
    SGD = "SGD"
    THB = "THB"
    TRY = "TRY"
    TWD = "TWD"
    USD = "USD"
    ZAR = "ZAR"
