"""Fetcher HTTP síncrono com redirects limitados.

Máquina de estados de um fetch:
- Requesting → resposta 2xx → Success (retorna)
- Requesting/Redirected(n) → 3xx com Location:
    n < limite → GET no path do Location, mesma conexão → Redirected(n + 1)
    n == limite → TooManyRedirects
- qualquer outra resposta → FetchingError

Cada fetch abre seu próprio httpx.Client e o fecha em todos os caminhos
de saída. Nada é retentado.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from app.infra.http.decoder import decode_body
from app.infra.http.errors import (
    DecodingError,
    FetchingError,
    TooManyRedirects,
    TransportFailure,
)
from app.infra.http.models import FetchRequest, RawResponse
from config.logging import redact_headers
from config.settings.http import DEFAULT_MAX_REDIRECTS

if TYPE_CHECKING:
    from config.settings import HttpSettings

logger = logging.getLogger(__name__)

# Tamanho máximo do corpo enviado ao logger de diagnóstico
_DIAGNOSTIC_BODY_LIMIT = 4096


@dataclass
class HttpFetcherConfig:
    """Configuração do fetcher."""

    timeout_seconds: float = 30.0
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    verify_ssl: bool = True
    default_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: HttpSettings) -> HttpFetcherConfig:
        return cls(
            timeout_seconds=settings.timeout_seconds,
            max_redirects=settings.max_redirects,
            verify_ssl=settings.verify_ssl,
        )


class HttpFetcher:
    """Executa requisições contra um único host de provider.

    Args:
        base_url: Esquema + host (ex: https://www.google.com)
        config: Timeouts, limite de redirects e headers padrão
        transport: Transporte httpx alternativo (testes usam MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        config: HttpFetcherConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._config = config or HttpFetcherConfig()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def fetch(
        self,
        request: FetchRequest,
        *,
        max_redirects: int | None = None,
        diagnostics: logging.Logger | None = None,
    ) -> RawResponse:
        """Executa a requisição seguindo até `max_redirects` redirects.

        Args:
            request: Requisição lógica (path relativo ao base_url)
            max_redirects: Limite de redirects; padrão da config (2)
            diagnostics: Logger que recebe toda resposta intermediária

        Returns:
            Resposta 2xx com corpo cru

        Raises:
            FetchingError: Resposta final fora de 2xx/3xx
            TooManyRedirects: Mais de `max_redirects` redirects seguidos
            TransportFailure: Erro de rede/timeout
        """
        limit = self._config.max_redirects if max_redirects is None else max_redirects
        # decoder só trata gzip; demais codificações não são pedidas
        headers = {"Accept-Encoding": "identity", **self._config.default_headers, **request.headers}
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                follow_redirects=False,
                transport=self._transport,
            ) as client:
                response = _send(
                    client,
                    client.build_request(
                        request.method,
                        request.path,
                        headers=headers,
                        content=request.content,
                    ),
                )
                return self._follow(client, response, headers, limit, diagnostics)
        except httpx.TransportError as exc:
            logger.warning(
                "http_transport_failure",
                extra={
                    "base_url": self._base_url,
                    "method": request.method,
                    "error_type": type(exc).__name__,
                },
            )
            raise TransportFailure(f"http_transport_failure: {type(exc).__name__}") from exc

    def _follow(
        self,
        client: httpx.Client,
        response: RawResponse,
        headers: dict[str, str],
        limit: int,
        diagnostics: logging.Logger | None,
    ) -> RawResponse:
        redirects = 0
        while True:
            if diagnostics is not None:
                inspect_response(response, diagnostics)

            if response.is_success:
                return response

            if not response.is_redirect:
                logger.warning(
                    "http_fetch_failed",
                    extra={"url": response.url, "status_code": response.status_code},
                )
                raise FetchingError(response)

            location = response.location
            if redirects == limit:
                logger.warning(
                    "http_too_many_redirects",
                    extra={"url": response.url, "redirects": redirects},
                )
                raise TooManyRedirects(response, location)

            target = httpx.URL(location or "")
            path = target.raw_path.decode("ascii")
            logger.info(
                "http_redirect_followed",
                extra={"from_url": response.url, "to_path": target.path, "redirects": redirects + 1},
            )
            response = _send(client, client.build_request("GET", path, headers=headers))
            redirects += 1


def _send(client: httpx.Client, request: httpx.Request) -> RawResponse:
    """Envia e lê o corpo cru, sem a descompressão automática do httpx."""
    response = client.send(request, stream=True)
    try:
        body = b"".join(response.iter_raw())
    finally:
        response.close()
    return RawResponse.from_httpx(response, body)


def inspect_response(response: RawResponse, diagnostics: logging.Logger) -> None:
    """Despeja status, headers e corpo no logger de diagnóstico.

    Não altera o fluxo do fetch: um corpo que não descomprime é logado cru.
    """
    try:
        body = decode_body(response)
    except DecodingError:
        body = response.body
    preview = body[:_DIAGNOSTIC_BODY_LIMIT].decode("utf-8", errors="replace")
    diagnostics.debug(
        "http_response_inspected",
        extra={
            "url": response.url,
            "status_code": response.status_code,
            "reason_phrase": response.reason_phrase,
            "headers": redact_headers(dict(response.headers.items())),
            "body": preview,
        },
    )
