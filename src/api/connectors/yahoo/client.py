"""Connector Yahoo Address Book (BBAuth).

Fluxo:
1. authentication_url() → usuário autentica no Yahoo
2. Yahoo redireciona para a URL da aplicação com `token` e `sig`
3. contacts(redirect_path): valida a assinatura, troca o token por
   WSSID + Cookie e busca a agenda em JSON
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from api.connectors.query import build_query
from api.normalizers.yahoo import YahooCredentials, parse_contacts_json, parse_credentials
from app.domain import ContactFeed
from app.infra.crypto import append_signature, fill_template, unix_timestamp, validate_signed_path
from app.infra.http import FetchRequest, decode_body
from app.services.contact_import import ContactImportPipeline
from config.settings.providers.yahoo import YahooSettings
from utils.errors import ContactsImportError, TokenNotFound

if TYPE_CHECKING:
    from app.domain import Contact
    from app.protocols.contact_provider import FetcherProtocol

logger = logging.getLogger(__name__)

AUTH_PATH = "/WSLogin/V1/wslogin?appid={appid}&ts={ts}"
CREDENTIAL_PATH = "/WSLogin/V1/wspwtoken_login?appid={appid}&ts={ts}&token={token}"
ADDRESS_BOOK_PATH = "/v1/searchContacts"

_TOKEN_PATTERN = re.compile(r"[?&]token=([^&]+)")


class YahooContactsClient:
    """Cliente BBAuth + Address Book de uma aplicação Yahoo.

    Args:
        settings: appid e secret da aplicação
        auth_fetcher: Transporte para https://api.login.yahoo.com
        address_book_fetcher: Transporte para o host da Address Book API
        clock: Fonte do timestamp embutido nas URLs assinadas
        diagnostics: Logger de diagnóstico do fetcher
    """

    provider = "yahoo"

    def __init__(
        self,
        settings: YahooSettings,
        *,
        auth_fetcher: FetcherProtocol,
        address_book_fetcher: FetcherProtocol,
        clock: Callable[[], float] = time.time,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._auth_fetcher = auth_fetcher
        self._clock = clock
        self._diagnostics = diagnostics
        self._pipeline = ContactImportPipeline(self, address_book_fetcher, diagnostics=diagnostics)
        self._credentials: YahooCredentials | None = None

    @property
    def credentials(self) -> YahooCredentials | None:
        return self._credentials

    def authentication_url(self, appdata: str | None = None) -> str:
        """URL assinada de login BBAuth (timestamp do momento da chamada)."""
        path = fill_template(AUTH_PATH, appid=self._settings.appid, ts=unix_timestamp(self._clock))
        if appdata:
            path += "&" + build_query({"appdata": appdata})
        return f"https://{self._settings.auth_domain}{append_signature(path, self._settings.secret)}"

    def sign_params(self, params: Mapping[str, object]) -> dict[str, object]:
        # a Address Book API autentica via WSSID + Cookie
        return dict(params)

    def validate_redirect(self, path: str) -> str:
        """Valida o redirect do Yahoo e retorna o token de usuário.

        Raises:
            InvalidSignature: Assinatura ausente ou divergente
            TokenNotFound: Redirect assinado sem `token`
        """
        unsigned = validate_signed_path(path, self._settings.secret)
        match = _TOKEN_PATTERN.search(unsigned)
        if match is None:
            raise TokenNotFound("token")
        return match.group(1)

    def credentials_path(self, token: str) -> str:
        path = fill_template(
            CREDENTIAL_PATH,
            appid=self._settings.appid,
            ts=unix_timestamp(self._clock),
            token=token,
        )
        return append_signature(path, self._settings.secret)

    def access_credentials(self, token: str) -> YahooCredentials:
        """Troca o token de usuário por WSSID + Cookie.

        Raises:
            FetchingError: Yahoo recusou o token
            ParsingError: Resposta sem WSSID/Cookie
        """
        response = self._auth_fetcher.fetch(
            FetchRequest(self.credentials_path(token)),
            diagnostics=self._diagnostics,
        )
        self._credentials = parse_credentials(decode_body(response))
        logger.info("yahoo_credentials_obtained")
        return self._credentials

    def translate_params(self, params: Mapping[str, object]) -> str:
        return build_query(params)

    def contacts_request(self, params: Mapping[str, object]) -> FetchRequest:
        if self._credentials is None:
            raise ContactsImportError("yahoo_credentials_missing")
        query = self.translate_params(
            {
                "format": "json",
                "fields": "name,email",
                "appid": self._settings.appid,
                "WSSID": self._credentials.wssid,
                **self.sign_params(params),
            }
        )
        return FetchRequest(
            f"{ADDRESS_BOOK_PATH}?{query}",
            headers={"Cookie": self._credentials.cookie},
        )

    def parse_feed(self, body: bytes) -> ContactFeed:
        return parse_contacts_json(body)

    def contacts(self, redirect_path: str) -> list[Contact]:
        """Fluxo completo a partir do path do redirect do Yahoo."""
        self.access_credentials(self.validate_redirect(redirect_path))
        return list(self._pipeline.run({}).contacts)
