"""Formatters de logging estruturado.

Campos obrigatórios em todo log JSON: correlation_id, service,
asctime, level (levelname) e logger (name). Valores de `extra` que o
json não serializa (bytes de corpo, headers httpx, datas) passam por
`_json_default`.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def _json_default(value: object) -> object:
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): str(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return repr(value)


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "app.infra.http.fetcher",
         "message": "http_redirect_followed", "correlation_id": "abc-123",
         "service": "contacts_import", "redirects": 1}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_default=_json_default,
    )
