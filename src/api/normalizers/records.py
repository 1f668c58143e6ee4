"""Estrutura intermediária comum aos extractors e conversão para Contact."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import ValidationError

from app.domain import Contact, ContactFeed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ContactRecord:
    """Entrada extraída do documento, antes da validação."""

    name: str | None = None
    emails: list[str] = field(default_factory=list)
    username: str | None = None


def join_name(*parts: str | None) -> str | None:
    """Junta partes de nome com espaço; resultado vazio vira None."""
    name = " ".join(part.strip() for part in parts if part).strip()
    return name or None


def build_feed(
    records: Iterable[ContactRecord],
    updated_at_string: str | None = None,
    *,
    provider: str,
) -> ContactFeed:
    """Converte registros em ContactFeed, descartando os sem email.

    A ordem do documento é mantida; não há deduplicação.
    """
    contacts: list[Contact] = []
    skipped = 0
    for record in records:
        emails = [email.strip() for email in record.emails if email and email.strip()]
        if not emails:
            skipped += 1
            continue
        try:
            contacts.append(Contact(name=record.name, emails=tuple(emails), username=record.username))
        except ValidationError:
            skipped += 1

    if skipped:
        logger.debug(
            "contact_entries_skipped",
            extra={"provider": provider, "skipped": skipped, "imported": len(contacts)},
        )
    return ContactFeed(contacts=tuple(contacts), updated_at_string=updated_at_string, skipped=skipped)
