"""Erros de parse de feeds de provider."""

from __future__ import annotations

from utils.errors import ContactsImportError


class ParsingError(ContactsImportError):
    """Documento estruturalmente inválido (raiz ausente, JSON/XML quebrado).

    Entradas individuais malformadas não levantam este erro: são
    descartadas pelo parser.
    """
