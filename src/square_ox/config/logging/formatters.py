"""Formatter JSON dos logs do cliente Square."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem em que os campos aparecem no JSON; extras vêm depois
LOG_FIELD_ORDER: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "client_version",
    "correlation_id",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos obrigatórios em ordem fixa.

    Mensagens e detalhes da Square podem vir em português, então o JSON
    sai sem escapar caracteres não-ASCII.

    Exemplo de output:
        {
            "timestamp": "2026-10-19T10:30:00+0000",
            "level": "DEBUG",
            "logger": "square_ox.api.connectors.square.square_logging",
            "message": "square_request_ok",
            "service": "square_ox",
            "client_version": "0.2.0",
            "correlation_id": "",
            "method": "GET",
            "path": "/v2/locations",
            "status_code": 200
        }
    """
    return JsonFormatter(
        list(LOG_FIELD_ORDER),
        datefmt=TIMESTAMP_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
