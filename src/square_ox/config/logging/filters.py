"""Filters de logging: contexto do cliente e mascaramento de credenciais."""

from __future__ import annotations

import logging
import re
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s\"',]+", re.IGNORECASE)
REDACTED = "***"


def _client_version() -> str:
    try:
        return version("square-ox")
    except PackageNotFoundError:
        return "unknown"


class CorrelationIdFilter(logging.Filter):
    """Injeta service, client_version e correlation_id em cada record.

    Um correlation_id passado explicitamente via `extra` é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")
        self._client_version = _client_version()

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        record.client_version = self._client_version
        return True


class BearerRedactionFilter(logging.Filter):
    """Mascara `Bearer <token>` na mensagem final do record.

    Vale para qualquer logger que passe pelo handler, inclusive httpx em DEBUG.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Erro de formatação fica para o Handler.handleError
            return True
        redacted = _BEARER_PATTERN.sub(rf"\g<1>{REDACTED}", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
