"""Configuração centralizada de logging JSON.

A biblioteca apenas emite logs; quem a usa decide se chama
`configure_logging` (ex: scripts e serviços) ou mantém o próprio setup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from square_ox.config.logging.filters import BearerRedactionFilter, CorrelationIdFilter
from square_ox.config.logging.formatters import create_json_formatter
from square_ox.config.settings import DEFAULT_SERVICE_NAME, get_square_settings

if TYPE_CHECKING:
    from collections.abc import Callable

    from square_ox.config.settings import SquareSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(BearerRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(
    settings: SquareSettings | None = None,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging com `LOG_LEVEL` e `SERVICE_NAME`.

    Sem `settings`, usa as do ambiente via `get_square_settings`.
    """
    settings = settings or get_square_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=correlation_id_getter,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
