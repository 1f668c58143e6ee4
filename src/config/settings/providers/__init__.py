"""Settings por provider de contatos.

Credenciais de aplicação (app id, secret, URLs de retorno) são lidas de
variáveis de ambiente; nenhum arquivo é carregado aqui.
"""

from __future__ import annotations

from config.settings.providers.flickr import FlickrSettings, get_flickr_settings
from config.settings.providers.google import GoogleSettings, get_google_settings
from config.settings.providers.windows_live import (
    WindowsLiveSettings,
    get_windows_live_settings,
)
from config.settings.providers.yahoo import YahooSettings, get_yahoo_settings

__all__ = [
    "FlickrSettings",
    "GoogleSettings",
    "WindowsLiveSettings",
    "YahooSettings",
    "get_flickr_settings",
    "get_google_settings",
    "get_windows_live_settings",
    "get_yahoo_settings",
]
