"""Exceções base compartilhadas pelas camadas de importação de contatos."""

from __future__ import annotations


class ContactsImportError(RuntimeError):
    """Base para todas as falhas tipadas da importação de contatos.

    Chamadores podem capturar apenas esta classe e mapear para a UX do
    provider (ex: "autentique novamente", "tente mais tarde").
    """


class TokenNotFound(ContactsImportError):
    """Resposta de troca de token sem a linha `Chave=` esperada."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"token_not_found: {marker}")
        self.marker = marker
