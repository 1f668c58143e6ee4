"""Factories de fetchers e connectors de provider.

Composition root: único ponto que lê settings e liga transporte,
diagnóstico e connectors. Os connectors recebem tudo por injeção.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors import (
    FlickrAuthClient,
    GoogleContactsClient,
    WindowsLiveContactsClient,
    YahooContactsClient,
)
from app.infra.http import HttpFetcher, HttpFetcherConfig
from config.logging import get_diagnostics_logger
from config.settings import (
    get_flickr_settings,
    get_google_settings,
    get_http_settings,
    get_windows_live_settings,
    get_yahoo_settings,
)

if TYPE_CHECKING:
    import httpx

    from config.settings import HttpSettings

logger = logging.getLogger(__name__)

FLICKR_API_URL = "http://api.flickr.com"


def create_fetcher(
    base_url: str,
    settings: HttpSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> HttpFetcher:
    """Cria fetcher para um host de provider com User-Agent e timeouts das settings."""
    http_settings = settings or get_http_settings()
    config = HttpFetcherConfig.from_settings(http_settings)
    config.default_headers["User-Agent"] = http_settings.user_agent
    return HttpFetcher(base_url, config, transport=transport)


def create_diagnostics_logger(settings: HttpSettings | None = None) -> logging.Logger | None:
    return get_diagnostics_logger((settings or get_http_settings()).verbose)


def create_google_client(
    token: str,
    *,
    user: str = "default",
    client_login: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> GoogleContactsClient:
    """Cria connector Google autenticado com um session/ClientLogin token.

    Args:
        token: Session token AuthSub ou token ClientLogin
        user: Dono do feed
        client_login: Token veio do ClientLogin
        transport: Transporte httpx alternativo (testes)
    """
    settings = get_google_settings()
    client = GoogleContactsClient(
        token,
        fetcher=create_fetcher(f"https://{settings.domain}", transport=transport),
        settings=settings,
        user=user,
        client_login=client_login,
        diagnostics=create_diagnostics_logger(),
    )
    logger.info("google_client_created", extra={"projection": settings.projection})
    return client


def create_google_fetcher(*, transport: httpx.BaseTransport | None = None) -> HttpFetcher:
    """Fetcher para as trocas de token (AuthSubSessionToken, ClientLogin)."""
    return create_fetcher(f"https://{get_google_settings().domain}", transport=transport)


def create_yahoo_client(*, transport: httpx.BaseTransport | None = None) -> YahooContactsClient:
    """Cria connector Yahoo com fetchers para BBAuth e Address Book."""
    settings = get_yahoo_settings()
    client = YahooContactsClient(
        settings,
        auth_fetcher=create_fetcher(f"https://{settings.auth_domain}", transport=transport),
        address_book_fetcher=create_fetcher(
            f"http://{settings.address_book_domain}", transport=transport
        ),
        diagnostics=create_diagnostics_logger(),
    )
    logger.info("yahoo_client_created")
    return client


def create_flickr_client(*, transport: httpx.BaseTransport | None = None) -> FlickrAuthClient:
    """Cria connector Flickr para o handshake de autenticação."""
    client = FlickrAuthClient(
        get_flickr_settings(),
        fetcher=create_fetcher(FLICKR_API_URL, transport=transport),
        diagnostics=create_diagnostics_logger(),
    )
    logger.info("flickr_client_created")
    return client


def create_windows_live_client(
    *,
    transport: httpx.BaseTransport | None = None,
) -> WindowsLiveContactsClient:
    """Cria connector Windows Live (consentimento + Live Contacts)."""
    settings = get_windows_live_settings()
    client = WindowsLiveContactsClient(
        settings,
        fetcher=create_fetcher(f"https://{settings.contacts_domain}", transport=transport),
        diagnostics=create_diagnostics_logger(),
    )
    logger.info("windows_live_client_created")
    return client
