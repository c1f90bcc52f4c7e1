"""Enums de protocolo para a Square API."""

from __future__ import annotations

from enum import StrEnum

SQUARE_PRODUCTION_BASE_URL: str = "https://connect.squareup.com"
SQUARE_SANDBOX_BASE_URL: str = "https://connect.squareupsandbox.com"
SQUARE_API_VERSION_PATH: str = "v2"


class Verb(StrEnum):
    """Verbos HTTP aceitos pelos endpoints da Square API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ClientMode(StrEnum):
    """Modo de operação do cliente (define a URL base)."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        """URL base fixa associada ao modo."""
        if self is ClientMode.PRODUCTION:
            return SQUARE_PRODUCTION_BASE_URL
        return SQUARE_SANDBOX_BASE_URL
