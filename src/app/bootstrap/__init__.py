"""Bootstrap da importação de contatos — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
expõe as factories que conectam fetchers concretos aos connectors.

Uso:
    from app.bootstrap import initialize_app, create_google_client

    # Na inicialização da aplicação hospedeira
    initialize_app()

    client = create_google_client(session_token)
    contacts = client.all_contacts()
"""

from __future__ import annotations

import logging
import os

from app.bootstrap.clients import (
    create_fetcher,
    create_flickr_client,
    create_google_client,
    create_google_fetcher,
    create_windows_live_client,
    create_yahoo_client,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_flickr_settings,
    get_google_settings,
    get_http_settings,
    get_windows_live_settings,
    get_yahoo_settings,
)

# Nome do serviço para logs e métricas
SERVICE_NAME = "contacts_import"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez pela aplicação hospedeira. Com
    HTTP_VERBOSE=true o nível vai para DEBUG para que o logger de
    diagnóstico do fetcher seja emitido.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if get_http_settings().verbose:
        log_level = "DEBUG"

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(providers: tuple[str, ...] = ()) -> list[str]:
    """Valida settings HTTP e dos providers habilitados.

    Args:
        providers: Providers em uso (google, yahoo, flickr, windows_live)

    Returns:
        Lista de erros prefixados pelo componente (vazia = OK)
    """
    errors = [f"http: {error}" for error in get_http_settings().validate()]
    validators = {
        "google": lambda: get_google_settings().validate_settings(),
        "yahoo": lambda: get_yahoo_settings().validate_settings(),
        "flickr": lambda: get_flickr_settings().validate_settings(),
        "windows_live": lambda: get_windows_live_settings().validate_settings(),
    }
    for provider in providers:
        validate = validators.get(provider)
        if validate is None:
            errors.append(f"{provider}: provider desconhecido")
            continue
        errors.extend(f"{provider}: {error}" for error in validate())

    if errors:
        logger.warning(
            "settings_validation_failed",
            extra={"component": "bootstrap", "error_count": len(errors), "errors": errors},
        )
    else:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
    return errors


__all__ = [
    "SERVICE_NAME",
    "create_fetcher",
    "create_flickr_client",
    "create_google_client",
    "create_google_fetcher",
    "create_windows_live_client",
    "create_yahoo_client",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
