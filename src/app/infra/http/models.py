"""Value objects de requisição e resposta do fetcher."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True, slots=True)
class FetchRequest:
    """Requisição lógica contra o host do provider.

    Attributes:
        path: Caminho + query string (ex: /m8/feeds/contacts/default/thin?max-results=200)
        method: GET ou POST
        headers: Headers adicionais (Authorization, Cookie, Accept-Encoding...)
        content: Corpo já serializado (ex: form urlencoded do ClientLogin)
    """

    path: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes | None = None


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Resposta HTTP com o corpo exatamente como recebido (sem descompressão)."""

    status_code: int
    reason_phrase: str
    headers: httpx.Headers
    body: bytes
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        """3xx com Location; 3xx sem Location é tratado como falha."""
        return 300 <= self.status_code < 400 and "location" in self.headers

    @property
    def location(self) -> str | None:
        return self.headers.get("location")

    @classmethod
    def from_httpx(cls, response: httpx.Response, body: bytes) -> RawResponse:
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=response.headers,
            body=body,
            url=str(response.request.url),
        )
