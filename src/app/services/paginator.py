"""Recuperação paginada de contatos.

Regra de término: uma página com menos itens que `chunk_size` encerra
a busca. Quando o total é múltiplo de `chunk_size`, uma chamada extra
retorna página vazia.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain import Contact

logger = logging.getLogger(__name__)

PageFetcher = Callable[[int, int], Sequence["Contact"]]


def fetch_all(fetch_one_page: PageFetcher, chunk_size: int) -> list[Contact]:
    """Busca páginas a partir do offset 0 até uma página incompleta.

    Args:
        fetch_one_page: Recebe (offset, limit) e retorna os contatos da página
        chunk_size: Tamanho de página solicitado ao provider

    Returns:
        Todos os contatos, em ordem de página

    Raises:
        ValueError: chunk_size menor que 1
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size deve ser >= 1, recebido {chunk_size}")

    contacts: list[Contact] = []
    offset = 0
    pages = 0
    while True:
        page = fetch_one_page(offset, chunk_size)
        pages += 1
        contacts.extend(page)
        if len(page) < chunk_size:
            break
        offset += chunk_size

    logger.info("contacts_pagination_completed", extra={"pages": pages, "total": len(contacts)})
    return contacts
