"""Transporte HTTP compartilhado pelos connectors de provider.

fetcher: requisição + redirects limitados; decoder: descompressão.
"""

from app.infra.http.decoder import decode_body
from app.infra.http.errors import (
    DecodingError,
    FetchingError,
    TooManyRedirects,
    TransportFailure,
)
from app.infra.http.fetcher import HttpFetcher, HttpFetcherConfig, inspect_response
from app.infra.http.models import FetchRequest, RawResponse

__all__ = [
    "DecodingError",
    "FetchRequest",
    "FetchingError",
    "HttpFetcher",
    "HttpFetcherConfig",
    "RawResponse",
    "TooManyRedirects",
    "TransportFailure",
    "decode_body",
    "inspect_response",
]
