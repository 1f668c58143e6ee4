"""Correlation_id por sessão de importação de contatos.

Cada chamada de importação (autenticação → fetch → parse) recebe um
correlation_id próprio, injetado em todos os logs do caminho.
Usa ContextVar para que sessões concorrentes da aplicação hospedeira
não compartilhem estado.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope() as correlation_id:
        pipeline.run(provider, request)
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Escopo de sessão de importação.

    Reaproveita o correlation_id já ativo (chamadas aninhadas, ex: o
    paginator chamando o pipeline) e só gera um novo no escopo externo.
    """
    current = get_correlation_id()
    if current and correlation_id is None:
        yield current
        return
    token = set_correlation_id(correlation_id)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
