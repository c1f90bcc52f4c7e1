"""Settings do cliente Square.

Carregadas de variáveis de ambiente; o token nunca tem valor padrão real.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from square_ox.constants import ClientMode

DEFAULT_SERVICE_NAME: str = "square_ox"


@dataclass(frozen=True)
class SquareSettings:
    """Configurações de acesso à Square API.

    Attributes:
        access_token: Token de acesso da aplicação Square
        environment: Modo de operação (sandbox|production)
        verify_ssl: Verifica certificados TLS nas chamadas
        log_level: Nível de log (DEBUG, INFO, ...)
        service_name: Nome do serviço nos logs estruturados
    """

    access_token: str = ""
    environment: ClientMode = ClientMode.SANDBOX
    verify_ssl: bool = True
    log_level: str = "INFO"
    service_name: str = DEFAULT_SERVICE_NAME

    @property
    def is_production(self) -> bool:
        """Retorna True se o modo é produção."""
        return self.environment is ClientMode.PRODUCTION

    @property
    def base_url(self) -> str:
        """URL base correspondente ao modo configurado."""
        return self.environment.base_url

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_token or not self.access_token.strip():
            errors.append("SQUARE_ACCESS_TOKEN não configurado")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> ClientMode:
    """Converte string de ambiente para ClientMode (padrão: sandbox)."""
    env_lower = env_str.strip().lower()
    if env_lower in ("production", "prod"):
        return ClientMode.PRODUCTION
    return ClientMode.SANDBOX


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off")


def _load_from_env() -> SquareSettings:
    """Carrega SquareSettings a partir de variáveis de ambiente."""
    return SquareSettings(
        access_token=os.getenv("SQUARE_ACCESS_TOKEN", ""),
        environment=_parse_environment(os.getenv("SQUARE_ENVIRONMENT", "sandbox")),
        verify_ssl=_parse_bool(os.getenv("SQUARE_VERIFY_SSL", "true")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )


@lru_cache(maxsize=1)
def get_square_settings() -> SquareSettings:
    """Retorna instância cacheada de SquareSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
