"""Configuração do square_ox: settings de ambiente e logging estruturado."""

from square_ox.config.settings import SquareSettings, get_square_settings

__all__ = [
    "SquareSettings",
    "get_square_settings",
]
