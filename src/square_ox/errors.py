"""Taxonomia de erros do cliente Square.

Cada erro identifica o estágio em que a chamada falhou via atributo
`stage`. Nenhum erro é recuperado internamente: tudo sobe para o chamador.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from square_ox.models.response import ResponseError


class SquareError(Exception):
    """Erro base do cliente Square (sem dados sensíveis)."""

    stage: str = "unknown"


class HeaderBuildError(SquareError):
    """Credencial não pode ser codificada como valor de header."""

    stage = "header"


class TransportError(SquareError):
    """Falha de rede (DNS, conexão recusada, timeout da camada inferior)."""

    stage = "transport"


class DeserializationError(SquareError):
    """Body da resposta não é JSON válido ou não tem formato de envelope."""

    stage = "deserialization"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(SquareError):
    """Representação de recurso sem campo obrigatório na finalização."""

    stage = "validation"

    def __init__(self, message: str = "invalid", missing_fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing_fields = missing_fields


class BuilderConsumedError(SquareError):
    """Builder já finalizado foi reutilizado."""

    stage = "validation"


class SquareApiError(SquareError):
    """Resposta da Square carrega itens em `errors`."""

    stage = "api"

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: list[ResponseError],
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors
