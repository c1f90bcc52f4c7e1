"""Conector Square - dispatcher de requisições para a Square API.

Responsabilidades:
- Montagem de URL (modo sandbox/produção + path do endpoint)
- Header Authorization Bearer validado antes de qualquer IO
- Serialização do body e desserialização do envelope de resposta
- Logging sem token e sem bodies
"""

from .http_client import SquareHttpClient, build_authorization_header
from .square_logging import log_square_errors, log_success

__all__ = [
    "SquareHttpClient",
    "build_authorization_header",
    "log_square_errors",
    "log_success",
]
