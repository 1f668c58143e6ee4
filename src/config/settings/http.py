"""Settings do transporte HTTP compartilhado pelos providers.

Configurações do fetcher: timeout, limite de redirects, User-Agent e
modo de diagnóstico (dump de respostas intermediárias).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings._env import parse_bool

# Limite fixo de redirects seguidos por fetch
DEFAULT_MAX_REDIRECTS = 2

DEFAULT_USER_AGENT = "contacts-import/1.0"


@dataclass(frozen=True)
class HttpSettings:
    """Configurações HTTP.

    Attributes:
        timeout_seconds: Timeout de connect/read por requisição
        max_redirects: Máximo de redirects seguidos antes de TooManyRedirects
        user_agent: Identificador enviado aos providers
        verify_ssl: Verificar certificado TLS do provider
        verbose: Habilita o logger de diagnóstico do fetcher
    """

    timeout_seconds: float = 30.0
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    verbose: bool = False

    def validate(self) -> list[str]:
        """Valida configurações HTTP.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.timeout_seconds <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS deve ser > 0")

        if self.max_redirects < 0:
            errors.append("HTTP_MAX_REDIRECTS deve ser >= 0")

        if not self.user_agent.strip():
            errors.append("HTTP_USER_AGENT não pode ser vazio")

        return errors


def _load_http_from_env() -> HttpSettings:
    """Carrega HttpSettings de variáveis de ambiente."""
    return HttpSettings(
        timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "30")),
        max_redirects=int(os.getenv("HTTP_MAX_REDIRECTS", str(DEFAULT_MAX_REDIRECTS))),
        user_agent=os.getenv("HTTP_USER_AGENT", DEFAULT_USER_AGENT),
        verify_ssl=parse_bool(os.getenv("HTTP_VERIFY_SSL", "true")),
        verbose=parse_bool(os.getenv("HTTP_VERBOSE", "false")),
    )


@lru_cache(maxsize=1)
def get_http_settings() -> HttpSettings:
    """Retorna instância cacheada de HttpSettings."""
    return _load_http_from_env()


__all__ = ["DEFAULT_MAX_REDIRECTS", "DEFAULT_USER_AGENT", "HttpSettings", "get_http_settings"]
