"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização da aplicação hospedeira
    configure_logging(level="INFO", service_name="contacts_import")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("contacts_fetched", extra={"provider": "google", "count": 42})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nunca logar tokens, secrets, cookies ou endereços de email.
"""

from config.logging.config import configure_logging, get_diagnostics_logger, get_logger
from config.logging.filters import CorrelationIdFilter, SensitiveHeaderFilter, redact_headers
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "SensitiveHeaderFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_diagnostics_logger",
    "get_logger",
    "redact_headers",
]
