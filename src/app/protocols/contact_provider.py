"""Protocolos de provider de contatos.

O pipeline fixo (fetch → decode → parse) é parametrizado por estas
capacidades; app/ não conhece os connectors concretos de api/.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import logging

    from app.domain import ContactFeed
    from app.infra.http import FetchRequest, RawResponse


class FetcherProtocol(Protocol):
    """Contrato mínimo do transporte usado pelo pipeline."""

    def fetch(
        self,
        request: FetchRequest,
        *,
        max_redirects: int | None = None,
        diagnostics: logging.Logger | None = None,
    ) -> RawResponse: ...


class ProviderAuthProtocol(Protocol):
    """Handshake de autenticação de um provider."""

    provider: str

    def authentication_url(self, *args: Any, **kwargs: Any) -> str: ...

    def sign_params(self, params: Mapping[str, object]) -> dict[str, object]: ...


class ContactProviderProtocol(ProviderAuthProtocol, Protocol):
    """Provider que também expõe um feed de contatos."""

    def translate_params(self, params: Mapping[str, object]) -> str: ...

    def contacts_request(self, params: Mapping[str, object]) -> FetchRequest: ...

    def parse_feed(self, body: bytes) -> ContactFeed: ...
