"""Núcleo genérico dos builders.

Ciclo de vida de um builder:
1. criado a partir de um body vazio (ou de um body inicial informado);
2. mutado por setters encadeáveis, cada um devolvendo o próprio builder;
3. consumido uma única vez por `build()` (ou `done()`, quando aninhado),
   que valida e devolve o body ou levanta ValidationError.

Depois de consumido, qualquer setter ou nova finalização levanta
BuilderConsumedError.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from square_ox.errors import BuilderConsumedError

T = TypeVar("T", bound=BaseModel)


class Builder(Generic[T]):
    """Acumulador fluente genérico sobre um modelo de body.

    Subclasses definem `body_type` e sobrescrevem `_validate`.

    Args:
        body: Body inicial; se None, usa `body_type()`
        parent: Builder pai, para composição aninhada
        attach: Callback que recebe o body validado e o grava no pai
    """

    body_type: ClassVar[type[BaseModel]]

    def __init__(
        self,
        body: T | None = None,
        parent: Builder[Any] | None = None,
        attach: Callable[[T], None] | None = None,
    ) -> None:
        self._body: T = body if body is not None else self.body_type()  # type: ignore[assignment]
        self._parent = parent
        self._attach = attach
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def parent(self) -> Builder[Any] | None:
        return self._parent

    def _open_body(self) -> T:
        """Body para mutação; falha se o builder já foi finalizado."""
        if self._consumed:
            raise BuilderConsumedError(f"{type(self).__name__} já foi finalizado")
        return self._body

    def _validate(self, body: T) -> None:
        """Predicado de validação do recurso. Padrão: sempre válido."""

    def _finalize(self) -> T:
        body = self._open_body()
        self._consumed = True
        self._validate(body)
        return body

    async def build(self) -> T:
        """Valida e devolve o body.

        Não faz IO; é async apenas por uniformidade com os métodos de request.

        Raises:
            ValidationError: Se faltar campo obrigatório
            BuilderConsumedError: Se o builder já foi finalizado
        """
        return self._finalize()

    def done(self) -> Builder[Any]:
        """Finaliza o builder aninhado, grava o resultado no pai e devolve o pai.

        Raises:
            ValueError: Se o builder não tem pai
            ValidationError: Se faltar campo obrigatório
        """
        if self._parent is None or self._attach is None:
            raise ValueError(f"{type(self).__name__} não tem builder pai")
        body = self._finalize()
        self._attach(body)
        return self._parent
