"""Helpers de leitura de env compartilhados pelos settings (http e providers)."""

from __future__ import annotations

import os


def read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def parse_bool(value: str) -> bool:
    """Converte texto de env em bool ("1", "true", "yes", "on")."""
    return value.strip().lower() in {"1", "true", "yes", "on"}
