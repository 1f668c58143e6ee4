"""Erros tipados do transporte HTTP.

Nenhum deles é retentado automaticamente; carregam contexto suficiente
(resposta, location) para diagnóstico ou retry manual pelo chamador.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import ContactsImportError

if TYPE_CHECKING:
    from app.infra.http.models import RawResponse


class FetchingError(ContactsImportError):
    """Resposta final nem de sucesso nem de redirect."""

    def __init__(self, response: RawResponse) -> None:
        super().__init__(
            f"expected success, got {response.status_code} ({response.reason_phrase})"
        )
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class TooManyRedirects(ContactsImportError):
    """Cadeia de redirects excedeu o limite do fetch."""

    def __init__(self, response: RawResponse, location: str | None) -> None:
        super().__init__(f"too_many_redirects: last location {location}")
        self.response = response
        self.location = location


class DecodingError(ContactsImportError):
    """Corpo comprimido não pôde ser descomprimido."""


class TransportFailure(ContactsImportError):
    """Falha de rede/timeout antes de qualquer resposta HTTP."""
