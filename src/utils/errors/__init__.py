"""Exceções utilitárias compartilhadas."""

from .exceptions import ContactsImportError, TokenNotFound

__all__ = [
    "ContactsImportError",
    "TokenNotFound",
]
