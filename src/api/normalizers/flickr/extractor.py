"""Extrator das respostas REST do Flickr.

Toda resposta vem num envelope `<rsp stat="ok|fail">`; em falha:
    <rsp stat="fail"><err code="96" msg="Invalid signature"/></rsp>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from api.normalizers._xml import child, child_text, parse_document
from api.normalizers.errors import ParsingError


def parse_envelope(body: bytes) -> ET.Element:
    """Retorna o elemento rsp de uma resposta com stat="ok".

    Raises:
        ParsingError: XML inválido ou stat="fail" (com a mensagem do provider)
    """
    root = parse_document(body, "rsp")
    if root.get("stat") == "ok":
        return root

    error = child(root, "err")
    code = error.get("code") if error is not None else None
    message = error.get("msg") if error is not None else None
    raise ParsingError(f"flickr_request_failed: {code} {message or root.get('stat')}")


def extract_frob(body: bytes) -> str:
    frob = child_text(parse_envelope(body), "frob")
    if frob is None:
        raise ParsingError("flickr_frob_missing")
    return frob


def extract_token(body: bytes) -> str:
    token = child_text(parse_envelope(body), "auth", "token")
    if token is None:
        raise ParsingError("flickr_token_missing")
    return token
