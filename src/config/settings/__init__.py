"""Agregador de settings do contacts_import.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Transporte HTTP
from config.settings.http import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_USER_AGENT,
    HttpSettings,
    get_http_settings,
)

# Providers de contatos
from config.settings.providers import (
    FlickrSettings,
    GoogleSettings,
    WindowsLiveSettings,
    YahooSettings,
    get_flickr_settings,
    get_google_settings,
    get_windows_live_settings,
    get_yahoo_settings,
)

__all__ = [
    # Constants
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_USER_AGENT",
    # Providers
    "FlickrSettings",
    "GoogleSettings",
    # HTTP
    "HttpSettings",
    "WindowsLiveSettings",
    "YahooSettings",
    "get_flickr_settings",
    "get_google_settings",
    "get_http_settings",
    "get_windows_live_settings",
    "get_yahoo_settings",
]
