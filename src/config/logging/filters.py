"""Filters de logging para injeção de contexto e redação.

Filters são responsáveis por adicionar campos contextuais
aos logs sem que o chamador precise informá-los manualmente.

Campos injetados:
- correlation_id: ID da sessão de importação
- service: Nome do serviço (ex: contacts_import)

Campos redigidos:
- headers: valores de Authorization, Cookie e Set-Cookie

Logs estruturados, sem tokens nem emails.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Headers que carregam credenciais de provider
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})

REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveHeaderFilter(logging.Filter):
    """Substitui valores de headers com credenciais antes da formatação.

    Atua sobre o campo `headers` passado via `extra` (ex: pelo logger de
    diagnóstico do fetcher). Nunca descarta o record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        headers = getattr(record, "headers", None)
        if isinstance(headers, Mapping):
            record.headers = redact_headers(headers)
        return True


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Retorna cópia dos headers com credenciais redigidas."""
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }
