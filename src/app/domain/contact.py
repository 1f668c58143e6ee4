"""Modelos de dominio para contatos importados.

Contact e o formato unico para o qual todos os feeds de provider
(Atom, XML proprietario, JSON) sao normalizados.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Contact(BaseModel):
    """Entrada de agenda importada de um provider.

    O primeiro email e o primario. Um Contact sem emails nunca e
    construido: os parsers descartam essas entradas antes.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Nome de exibicao, quando houver.")
    emails: tuple[str, ...] = Field(..., min_length=1, description="Emails em ordem do documento.")
    username: str | None = Field(default=None, description="Usuario no provider, quando houver.")

    @field_validator("emails")
    @classmethod
    def _reject_blank_emails(cls, emails: tuple[str, ...]) -> tuple[str, ...]:
        if any(not email for email in emails):
            raise ValueError("email vazio")
        return emails

    @property
    def email(self) -> str:
        """Email primario."""
        return self.emails[0]

    def __str__(self) -> str:
        label = f'"{self.name}" ' if self.name else ""
        return f"Contact {label}({self.email})"

    def __repr__(self) -> str:
        return f"<{self}>"


class ContactFeed(BaseModel):
    """Resultado do parse de um feed de contatos.

    `updated_at_string` guarda o literal do documento; `updated_at` so
    e interpretado quando pedido, para que um timestamp malformado nao
    derrube o parse inteiro.
    """

    model_config = ConfigDict(frozen=True)

    contacts: tuple[Contact, ...] = ()
    updated_at_string: str | None = None
    skipped: int = Field(default=0, ge=0, description="Entradas descartadas pelo parser.")

    @property
    def updated_at(self) -> datetime | None:
        """Timestamp da ultima atualizacao, ou None se ausente/malformado."""
        return parse_feed_timestamp(self.updated_at_string)


def parse_feed_timestamp(value: str | None) -> datetime | None:
    """Interpreta timestamps ISO-8601 de feed (ex: 2008-03-05T12:36:38.836Z)."""
    if not value or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


__all__ = ["Contact", "ContactFeed", "parse_feed_timestamp"]
