"""Pipeline de importação: fetch → decode → parse.

Um único pipeline para todos os providers; o que varia (montagem da
requisição, formato do feed) vem do ContactProviderProtocol.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING

from app.infra.http import decode_body
from app.observability import correlation_scope, record_import, record_latency
from app.services.paginator import fetch_all

if TYPE_CHECKING:
    from app.domain import Contact, ContactFeed
    from app.protocols.contact_provider import ContactProviderProtocol, FetcherProtocol

logger = logging.getLogger(__name__)


class ContactImportPipeline:
    """Executa o pipeline de um provider contra o host do feed.

    Args:
        provider: Capacidades do provider (request + parser)
        fetcher: Transporte apontado para o host do feed
        diagnostics: Logger de diagnóstico repassado ao fetcher
    """

    def __init__(
        self,
        provider: ContactProviderProtocol,
        fetcher: FetcherProtocol,
        *,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        self._provider = provider
        self._fetcher = fetcher
        self._diagnostics = diagnostics

    def run(self, params: Mapping[str, object]) -> ContactFeed:
        """Busca e normaliza uma página do feed.

        Raises:
            FetchingError, TooManyRedirects, TransportFailure: Falha HTTP
            DecodingError: Corpo comprimido corrompido
            ParsingError: Documento inválido
        """
        with correlation_scope():
            started = time.perf_counter()
            request = self._provider.contacts_request(params)
            response = self._fetcher.fetch(request, diagnostics=self._diagnostics)
            feed = self._provider.parse_feed(decode_body(response))

            record_latency(
                self._provider.provider,
                "fetch_contacts",
                (time.perf_counter() - started) * 1000,
            )
            record_import(self._provider.provider, imported=len(feed.contacts), skipped=feed.skipped)
            return feed

    def run_all(self, params: Mapping[str, object], chunk_size: int) -> list[Contact]:
        """Busca todas as páginas usando `limit`/`offset` lógicos."""
        with correlation_scope():
            return fetch_all(
                lambda offset, limit: self.run(
                    {**params, "limit": limit, "offset": offset}
                ).contacts,
                chunk_size,
            )
