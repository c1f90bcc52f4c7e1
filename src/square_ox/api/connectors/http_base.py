"""Cliente HTTP base para os conectores da camada API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from square_ox.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `default_headers` é uma sequência de pares para manter a config
    imutável e hashable. Não há retries nem timeout próprio: vale o
    padrão do httpx.
    """

    default_headers: tuple[tuple[str, str], ...] = ()
    verify_ssl: bool = True


def build_url(url: str, params: Sequence[tuple[str, str]] | None = None) -> httpx.URL:
    """Anexa a query string preservando a ordem e as chaves repetidas."""
    if not params:
        return httpx.URL(url)
    return httpx.URL(url, query=urlencode(list(params)).encode("ascii"))


class HttpClient:
    """Cliente HTTP simples: um `httpx.AsyncClient` novo por chamada."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: Sequence[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e devolve a resposta com body já lido.

        Raises:
            TransportError: Falha de rede em qualquer ponto da troca
        """
        merged_headers = {**dict(self._config.default_headers), **(headers or {})}
        try:
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await client.request(
                    method,
                    build_url(url, params),
                    json=json,
                    headers=merged_headers,
                )
        except httpx.RequestError as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise TransportError(f"http_transport_error: {type(exc).__name__}") from exc
