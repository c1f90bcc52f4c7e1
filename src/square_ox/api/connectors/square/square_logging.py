"""Helpers de logging para a Square API (sem token, sem bodies)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from square_ox.models.response import ResponseError

logger = logging.getLogger(__name__)


def log_square_errors(
    errors: list[ResponseError],
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga erros retornados pela Square, apenas códigos e categorias."""
    logger.warning(
        "square_api_errors",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "error_codes": [e.code for e in errors],
            "error_categories": sorted({e.category for e in errors}),
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    logger.debug(
        "square_request_ok",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
