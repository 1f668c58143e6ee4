"""Erros de assinatura e de consentimento delegado.

Definidos em app/infra para manter boundaries corretas; re-exportados
pelos connectors que validam callbacks de provider.
"""

from __future__ import annotations

from utils.errors import ContactsImportError


class InvalidSignature(ContactsImportError):
    """Assinatura de callback/consent não confere com o secret da aplicação.

    Nenhum token contido na requisição deve ser confiado após este erro.
    """

    def __init__(self, message: str, signature: str | None = None) -> None:
        super().__init__(message)
        self.signature = signature


class ConsentError(ContactsImportError):
    """Consent token ausente, recusado ou sem os campos obrigatórios."""
