"""Envelope de resposta genérico da Square API.

A Square devolve sempre um objeto JSON; falhas de negócio chegam no
array `errors` com status 4xx/5xx. O envelope guarda o payload bruto e
expõe helpers para os campos comuns a todos os recursos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from square_ox.errors import SquareApiError


@dataclass(frozen=True)
class ResponseError:
    """Item do array `errors` de uma resposta Square."""

    category: str
    code: str
    detail: str | None = None
    field: str | None = None


def parse_response_errors(payload: dict[str, Any]) -> list[ResponseError]:
    """Extrai itens de erro do payload.

    Returns:
        Lista de ResponseError (vazia se não houver erros)
    """
    raw_errors = payload.get("errors")
    if not raw_errors or not isinstance(raw_errors, list):
        return []

    parsed: list[ResponseError] = []
    for item in raw_errors:
        if not isinstance(item, dict):
            continue
        parsed.append(
            ResponseError(
                category=str(item.get("category", "UNKNOWN")),
                code=str(item.get("code", "UNKNOWN")),
                detail=item.get("detail"),
                field=item.get("field"),
            )
        )
    return parsed


@dataclass(frozen=True)
class SquareResponse:
    """Resposta desserializada: status HTTP + objeto JSON."""

    status_code: int
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def errors(self) -> list[ResponseError]:
        return parse_response_errors(self.payload)

    @property
    def cursor(self) -> str | None:
        """Cursor de paginação, quando o endpoint pagina."""
        return self.payload.get("cursor")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300 and not self.errors

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]

    def __contains__(self, key: object) -> bool:
        return key in self.payload

    def raise_for_errors(self) -> SquareResponse:
        """Levanta SquareApiError se a resposta trouxer `errors`.

        Returns:
            A própria resposta, para encadeamento

        Raises:
            SquareApiError: Se houver ao menos um item em `errors`
        """
        errors = self.errors
        if errors:
            codes = ", ".join(e.code for e in errors)
            raise SquareApiError(
                f"Square API error: {codes}",
                status_code=self.status_code,
                errors=errors,
            )
        return self
