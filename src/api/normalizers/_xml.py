"""Helpers de XML compartilhados pelos extractors.

Os feeds misturam namespaces (Atom, gd) e variações de caixa
(LiveContacts vs livecontacts); a navegação compara apenas o nome
local, sem namespace e sem diferenciar maiúsculas.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from api.normalizers.errors import ParsingError


def parse_document(body: bytes, root_name: str) -> ET.Element:
    """Faz o parse e confere o nome local da raiz.

    Raises:
        ParsingError: XML inválido ou raiz inesperada
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise ParsingError(f"xml_invalid: {exc}") from exc
    if local_name(root.tag) != root_name.lower():
        raise ParsingError(f"xml_unexpected_root: {local_name(root.tag)}")
    return root


def local_name(tag: str) -> str:
    """Nome do elemento sem namespace, em minúsculas."""
    return tag.rsplit("}", 1)[-1].lower()


def children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    wanted = name.lower()
    for child in element:
        if isinstance(child.tag, str) and local_name(child.tag) == wanted:
            yield child


def child(element: ET.Element, *path: str) -> ET.Element | None:
    """Primeiro elemento no caminho de nomes locais, ou None."""
    current: ET.Element | None = element
    for name in path:
        if current is None:
            return None
        current = next(children(current, name), None)
    return current


def child_text(element: ET.Element, *path: str) -> str | None:
    """Texto (strip) do elemento no caminho; vazio vira None."""
    found = child(element, *path)
    if found is None or found.text is None:
        return None
    return found.text.strip() or None
