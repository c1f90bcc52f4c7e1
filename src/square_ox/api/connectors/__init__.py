"""Conectores HTTP - único ponto de IO do cliente."""

from square_ox.api.connectors.http_base import HttpClient, HttpClientConfig

__all__ = [
    "HttpClient",
    "HttpClientConfig",
]
