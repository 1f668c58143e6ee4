"""Extrator do feed Atom de contatos Google.

Estrutura relevante:
- /feed/updated: timestamp do feed
- /feed/entry/title: nome de exibição
- /feed/entry/gd:email[@address]: zero ou mais emails
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from api.normalizers._xml import child_text, children, parse_document
from api.normalizers.records import ContactRecord


def extract_entry(entry: ET.Element) -> ContactRecord:
    emails = [element.get("address", "") for element in children(entry, "email")]
    return ContactRecord(name=child_text(entry, "title"), emails=emails)


def extract_feed(body: bytes) -> tuple[str | None, list[ContactRecord]]:
    """Retorna (updated literal, registros em ordem do documento).

    Raises:
        ParsingError: Documento não é um feed Atom
    """
    root = parse_document(body, "feed")
    records = [extract_entry(entry) for entry in children(root, "entry")]
    return child_text(root, "updated"), records
