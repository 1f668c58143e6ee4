"""Configuração do pytest para o projeto contacts_import."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Settings são cacheadas por lru_cache; cada teste lê a env do zero."""
    from config.settings import (
        get_flickr_settings,
        get_google_settings,
        get_http_settings,
        get_windows_live_settings,
        get_yahoo_settings,
    )

    for getter in (
        get_flickr_settings,
        get_google_settings,
        get_http_settings,
        get_windows_live_settings,
        get_yahoo_settings,
    ):
        getter.cache_clear()
