"""Connector do feed de contatos Google (GData)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from api.connectors.google.auth import authentication_url, authorization_header
from api.connectors.query import GOOGLE_CONTACTS_RULES, build_query
from api.normalizers.google import parse_contacts_feed
from app.domain import ContactFeed, parse_feed_timestamp
from app.infra.http import FetchRequest
from app.services.contact_import import ContactImportPipeline
from config.settings.providers.google import GOOGLE_FEEDS_PATH, GoogleSettings

if TYPE_CHECKING:
    from app.domain import Contact
    from app.protocols.contact_provider import FetcherProtocol

logger = logging.getLogger(__name__)

DEFAULT_USER = "default"


class GoogleContactsClient:
    """Acesso ao feed de contatos de um usuário autenticado.

    Args:
        token: Session token AuthSub ou token ClientLogin
        fetcher: Transporte apontado para https://www.google.com
        settings: Projeção e limite padrão
        user: Usuário dono do feed ("default" = dono do token)
        client_login: Token veio do ClientLogin (muda o header Authorization)
        diagnostics: Logger de diagnóstico do fetcher
    """

    provider = "google"

    def __init__(
        self,
        token: str,
        *,
        fetcher: FetcherProtocol,
        settings: GoogleSettings | None = None,
        user: str = DEFAULT_USER,
        client_login: bool = False,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        if not token or not token.strip():
            raise ValueError("token é obrigatório para acessar o feed Google")
        self._token = token
        self._settings = settings or GoogleSettings()
        self._user = user
        self._client_login = client_login
        self._pipeline = ContactImportPipeline(self, fetcher, diagnostics=diagnostics)
        self._updated_at_string: str | None = None

    @property
    def projection(self) -> str:
        return self._settings.projection

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": authorization_header(self._token, client_login=self._client_login),
            "Accept-Encoding": "gzip",
        }

    def authentication_url(self, target: str | None, **options: object) -> str:
        return authentication_url(target, settings=self._settings, **options)

    def sign_params(self, params: Mapping[str, object]) -> dict[str, object]:
        # AuthSub autentica via header; parâmetros não são assinados
        return dict(params)

    def translate_params(self, params: Mapping[str, object]) -> str:
        return build_query(params, GOOGLE_CONTACTS_RULES)

    def contacts_path(self, params: Mapping[str, object]) -> str:
        query = self.translate_params({"limit": self._settings.default_limit, **params})
        return f"{GOOGLE_FEEDS_PATH}{quote_plus(self._user)}/{self.projection}?{query}"

    def contacts_request(self, params: Mapping[str, object]) -> FetchRequest:
        return FetchRequest(self.contacts_path(self.sign_params(params)), headers=self.headers)

    def parse_feed(self, body: bytes) -> ContactFeed:
        feed = parse_contacts_feed(body)
        self._updated_at_string = feed.updated_at_string
        return feed

    def contacts(self, **params: object) -> list[Contact]:
        """Uma página do feed.

        Params lógicos: limit, offset, order, descending, updated_after.
        """
        return list(self._pipeline.run(params).contacts)

    def all_contacts(self, chunk_size: int = 200, **params: object) -> list[Contact]:
        """Todas as páginas, em blocos de `chunk_size`."""
        return self._pipeline.run_all(params, chunk_size)

    @property
    def updated_at_string(self) -> str | None:
        """Literal `updated` do último feed buscado."""
        return self._updated_at_string

    @property
    def updated_at(self) -> datetime | None:
        return parse_feed_timestamp(self._updated_at_string)
