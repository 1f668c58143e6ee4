"""Connector Flickr: autenticação por frob com chamadas assinadas.

Toda chamada REST leva `api_sig` = md5(secret + pares ordenados).
O Flickr não expõe emails de contatos; este connector cobre apenas o
handshake (frob → URL de autorização → token).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from api.connectors.query import build_query
from api.normalizers.flickr import extract_frob, extract_token
from app.infra.crypto import signed_params
from app.infra.http import FetchRequest, decode_body
from config.settings.providers.flickr import FlickrSettings

if TYPE_CHECKING:
    from app.protocols.contact_provider import FetcherProtocol

logger = logging.getLogger(__name__)

SERVICES_PATH = "/services/rest/"
AUTH_URL = "http://www.flickr.com/services/auth/"


class FlickrAuthClient:
    """Handshake de autenticação Flickr.

    Args:
        settings: api_key, secret e perms
        fetcher: Transporte para http://api.flickr.com
        diagnostics: Logger de diagnóstico do fetcher
    """

    provider = "flickr"

    def __init__(
        self,
        settings: FlickrSettings,
        *,
        fetcher: FetcherProtocol,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self._diagnostics = diagnostics

    def sign_params(self, params: Mapping[str, object]) -> dict[str, object]:
        return signed_params(params, self._settings.secret)

    def method_path(self, method: str, **params: object) -> str:
        """Path assinado de uma chamada REST (`method` + api_key + params)."""
        query = build_query(
            self.sign_params({"api_key": self._settings.api_key, "method": method, **params})
        )
        return f"{SERVICES_PATH}?{query}"

    def _call(self, method: str, **params: object) -> bytes:
        response = self._fetcher.fetch(
            FetchRequest(self.method_path(method, **params)),
            diagnostics=self._diagnostics,
        )
        return decode_body(response)

    def frob(self) -> str:
        """flickr.auth.getFrob."""
        return extract_frob(self._call("flickr.auth.getFrob"))

    def authentication_url(self, frob: str | None = None) -> str:
        """URL de autorização; busca um frob novo quando não informado."""
        params = {
            "api_key": self._settings.api_key,
            "perms": self._settings.perms,
            "frob": frob or self.frob(),
        }
        return f"{AUTH_URL}?{build_query(self.sign_params(params))}"

    def token(self, frob: str) -> str:
        """flickr.auth.getToken: troca o frob autorizado pelo token."""
        token = extract_token(self._call("flickr.auth.getToken", frob=frob))
        logger.info("flickr_token_obtained")
        return token
