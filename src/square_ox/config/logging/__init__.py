"""Configuração de logging estruturado.

Uso:
    from square_ox.config.logging import (
        configure_logging,
        configure_logging_from_settings,
        get_logger,
    )

    # Na inicialização da aplicação que usa o cliente
    configure_logging(level="INFO", service_name="square_ox")

    # Ou a partir de LOG_LEVEL e SERVICE_NAME do ambiente
    configure_logging_from_settings()

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Operação OK", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id
- service
- client_version
- level
- logger
- message
- timestamp

Nunca logar token de acesso nem bodies de request/response.
"""

from square_ox.config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from square_ox.config.logging.filters import BearerRedactionFilter, CorrelationIdFilter
from square_ox.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "BearerRedactionFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
]
