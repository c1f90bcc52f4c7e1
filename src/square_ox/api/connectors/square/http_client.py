"""Dispatcher HTTP especializado para a Square API.

Transforma um SquareRequest em uma chamada HTTP e devolve um
SquareResponse ou um erro tipado indicando o estágio da falha:
- header: credencial inválida como valor de header
- transport: falha de rede
- deserialization: body não-JSON ou fora do formato de envelope

Status HTTP não é tratado como falha: a Square reporta problemas de
negócio no array `errors` do próprio JSON.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from square_ox.api.connectors.http_base import HttpClient
from square_ox.api.connectors.square.square_logging import log_square_errors, log_success
from square_ox.errors import DeserializationError, HeaderBuildError
from square_ox.models.response import SquareResponse, parse_response_errors

if TYPE_CHECKING:
    import httpx

    from square_ox.models.request import SquareRequest

logger: logging.Logger = logging.getLogger(__name__)


def build_authorization_header(access_token: str) -> str:
    """Monta `Bearer <token>` garantindo que o valor é um header válido.

    Raises:
        HeaderBuildError: Token vazio, não-ASCII ou com caracteres de controle
    """
    if not access_token or not access_token.strip():
        raise HeaderBuildError("access_token é obrigatório para o header Authorization")

    if not access_token.isascii():
        raise HeaderBuildError("access_token contém caracteres não-ASCII")

    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in access_token):
        raise HeaderBuildError("access_token contém caracteres de controle")

    if access_token != access_token.strip():
        raise HeaderBuildError("access_token com espaços nas bordas")

    return f"Bearer {access_token}"


class SquareHttpClient(HttpClient):
    """Cliente HTTP da Square API.

    Stateless por chamada: pode ser compartilhado entre tasks concorrentes.
    """

    async def dispatch(
        self,
        base_url: str,
        access_token: str,
        request: SquareRequest,
    ) -> SquareResponse:
        """Envia a requisição para `<base_url><path>` e desserializa a resposta.

        Args:
            base_url: URL base do modo (sandbox ou produção)
            access_token: Token Bearer da aplicação
            request: Envelope com verbo, endpoint, body e query params

        Returns:
            SquareResponse com status e payload JSON

        Raises:
            HeaderBuildError: Se o token não vira um header válido
            TransportError: Se houver falha de rede
            DeserializationError: Se o body não for um objeto JSON
        """
        headers = self._build_headers(access_token)
        method = request.verb.value
        path = request.path
        url = f"{base_url}{path}"

        response = await self.request(
            method,
            url,
            json=request.json_body(),
            params=request.params,
            headers=headers,
        )
        return self._process_response(response, method, path)

    def _build_headers(self, access_token: str) -> dict[str, str]:
        return {
            "Authorization": build_authorization_header(access_token),
            "Accept": "application/json",
        }

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> SquareResponse:
        """Desserializa o body em SquareResponse."""
        try:
            payload: Any = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                "square_invalid_json",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise DeserializationError(
                "Response JSON inválido", status_code=response.status_code
            ) from e

        if not isinstance(payload, dict):
            logger.error(
                "square_unexpected_envelope",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "payload_type": type(payload).__name__,
                },
            )
            raise DeserializationError(
                f"Envelope inesperado: {type(payload).__name__}",
                status_code=response.status_code,
            )

        errors = parse_response_errors(payload)
        if errors:
            log_square_errors(errors, method, path, response.status_code)
        else:
            log_success(method, path, response.status_code)

        return SquareResponse(status_code=response.status_code, payload=payload)
