"""Envelope de requisição enviado ao dispatcher."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from square_ox.api.endpoints import Endpoint
from square_ox.constants import Verb


@dataclass(frozen=True)
class SquareRequest:
    """Verbo + endpoint + body opcional + query params opcionais.

    Attributes:
        verb: Verbo HTTP
        endpoint: Família de recurso e sufixo de path
        body: Modelo pydantic, mapping/lista serializável ou None
        params: Pares chave/valor de query, na ordem de envio
    """

    verb: Verb
    endpoint: Endpoint
    body: BaseModel | Mapping[str, Any] | Sequence[Any] | None = None
    params: Sequence[tuple[str, str]] | None = None

    @property
    def path(self) -> str:
        return self.endpoint.render()

    def json_body(self) -> Any:
        """Body pronto para `json=` do httpx (None = sem body)."""
        if self.body is None:
            return None
        if isinstance(self.body, BaseModel):
            return self.body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return self.body
