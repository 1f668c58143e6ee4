"""Descompressão de corpos de resposta.

O fetcher entrega o corpo cru; quem decide se há algo a descomprimir é
o header Content-Encoding.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from typing import TYPE_CHECKING

from app.infra.http.errors import DecodingError

if TYPE_CHECKING:
    from app.infra.http.models import RawResponse

logger = logging.getLogger(__name__)

GZIP_ENCODING = "gzip"


def decode_body(response: RawResponse) -> bytes:
    """Retorna o corpo da resposta descomprimido quando necessário.

    Args:
        response: Resposta com corpo cru

    Returns:
        Bytes prontos para o parser

    Raises:
        DecodingError: Se o stream gzip estiver corrompido ou truncado
    """
    encoding = (response.headers.get("content-encoding") or "").strip().lower()
    if encoding != GZIP_ENCODING:
        return response.body
    try:
        return gzip.decompress(response.body)
    except (OSError, EOFError, zlib.error) as exc:
        logger.warning(
            "http_body_decoding_failed",
            extra={"url": response.url, "body_size": len(response.body)},
        )
        raise DecodingError(f"gzip_decoding_failed: {exc}") from exc
