"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Formatação padronizada
- Logger de diagnóstico HTTP opcional (substitui o antigo modo verbose)

Uso:
    from config.logging import configure_logging, get_diagnostics_logger

    configure_logging(level="DEBUG", service_name="contacts_import")
    diagnostics = get_diagnostics_logger(enabled=True)
    fetcher.fetch(request, diagnostics=diagnostics)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveHeaderFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "contacts_import"

# Logger dedicado às respostas HTTP intermediárias (headers + body)
DIAGNOSTICS_LOGGER_NAME = "contacts_import.diagnostics"

# Loggers de biblioteca que registram URLs completas (com token/sig na query)
QUIET_LIBRARY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez pela aplicação hospedeira.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveHeaderFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    for name in QUIET_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def get_diagnostics_logger(enabled: bool) -> logging.Logger | None:
    """Retorna o logger de diagnóstico HTTP, ou None quando desabilitado.

    O fetcher recebe este logger explicitamente; ele nunca consulta
    variáveis de ambiente por conta própria.

    Args:
        enabled: Normalmente HttpSettings.verbose.

    Returns:
        Logger em nível DEBUG ou None.
    """
    if not enabled:
        return None
    diagnostics = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    diagnostics.setLevel(logging.DEBUG)
    return diagnostics
