"""Handle de cliente da Square API.

O SquareClient guarda apenas a credencial, o modo (sandbox/produção) e a
configuração HTTP. É imutável: `production()` devolve um novo handle.
Pode ser compartilhado entre tasks concorrentes sem coordenação.

Uso:
    client = SquareClient("your_square_access_token")
    response = await client.locations().list()

    prod = client.production()  # mesma credencial, URL base de produção
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from square_ox.api.connectors.http_base import HttpClientConfig
from square_ox.api.connectors.square.http_client import SquareHttpClient
from square_ox.api.resources.locations import Locations
from square_ox.config.settings import get_square_settings
from square_ox.constants import ClientMode, Verb
from square_ox.models.request import SquareRequest

if TYPE_CHECKING:
    from pydantic import BaseModel

    from square_ox.api.endpoints import Endpoint
    from square_ox.config.settings import SquareSettings
    from square_ox.models.response import SquareResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SquareClient:
    """Ponto de entrada autenticado para a Square API.

    Attributes:
        access_token: Token de acesso da aplicação (fora do repr)
        mode: Modo de operação; padrão sandbox
        http_config: Configuração do transporte HTTP
    """

    access_token: str = field(repr=False)
    mode: ClientMode = ClientMode.SANDBOX
    http_config: HttpClientConfig = field(default_factory=HttpClientConfig)

    @classmethod
    def from_settings(cls, settings: SquareSettings | None = None) -> SquareClient:
        """Cria cliente a partir de SquareSettings (do ambiente se None)."""
        square = settings or get_square_settings()
        problems = square.validate()
        if problems:
            logger.warning("square_settings_incomplete", extra={"problems": problems})
        return cls(
            access_token=square.access_token,
            mode=square.environment,
            http_config=HttpClientConfig(verify_ssl=square.verify_ssl),
        )

    def production(self) -> SquareClient:
        """Novo handle em modo produção, com a mesma credencial."""
        return dataclasses.replace(self, mode=ClientMode.PRODUCTION)

    @property
    def base_url(self) -> str:
        return self.mode.base_url

    def endpoint(self, endpoint: Endpoint) -> str:
        """URL completa para o endpoint no modo atual."""
        return f"{self.base_url}{endpoint.render()}"

    async def request(
        self,
        verb: Verb,
        endpoint: Endpoint,
        body: BaseModel | Mapping[str, Any] | Sequence[Any] | None = None,
        params: Sequence[tuple[str, str]] | None = None,
    ) -> SquareResponse:
        """Envia uma requisição para um endpoint da Square API.

        Args:
            verb: Verbo HTTP
            endpoint: Endpoint (família + sufixo)
            body: Body serializável em JSON (modelo pydantic, dict ou lista)
            params: Query params como pares chave/valor, em ordem

        Returns:
            SquareResponse com status e payload

        Raises:
            HeaderBuildError: Token inválido como header
            TransportError: Falha de rede
            DeserializationError: Resposta não é um objeto JSON
        """
        request = SquareRequest(verb=Verb(verb), endpoint=endpoint, body=body, params=params)
        dispatcher = SquareHttpClient(self.http_config)
        return await dispatcher.dispatch(self.base_url, self.access_token, request)

    def locations(self) -> Locations:
        return Locations(self)
