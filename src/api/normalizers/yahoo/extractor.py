"""Extrator do JSON da Yahoo Address Book API.

Estrutura típica:
    {"contacts": [{"fields": [
        {"type": "name", "first": "Max", "last": "Power"},
        {"type": "email", "data": "max@example.com"}
    ]}]}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from api.normalizers.errors import ParsingError
from api.normalizers.records import ContactRecord, join_name

logger = logging.getLogger(__name__)


def _load_document(body: bytes) -> dict[str, Any]:
    try:
        document = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ParsingError(f"json_invalid: {exc}") from exc
    if not isinstance(document, dict) or not isinstance(document.get("contacts"), list):
        raise ParsingError("json_missing_contacts")
    return document


def extract_entry(contact: dict[str, Any]) -> ContactRecord:
    record = ContactRecord()
    fields = contact.get("fields")
    if not isinstance(fields, list):
        return record

    for item in fields:
        if not isinstance(item, dict):
            continue
        field_type = item.get("type")
        if field_type == "email" and isinstance(item.get("data"), str):
            record.emails.append(item["data"])
        elif field_type == "name":
            record.name = join_name(_text(item.get("first")), _text(item.get("last")))
    return record


def _text(value: object) -> str | None:
    return value if isinstance(value, str) else None


def extract_contacts(body: bytes) -> list[ContactRecord]:
    """Extrai registros em ordem do documento.

    Raises:
        ParsingError: JSON inválido ou sem a lista `contacts`
    """
    records: list[ContactRecord] = []
    for contact in _load_document(body)["contacts"]:
        if not isinstance(contact, dict):
            logger.debug("yahoo_contact_malformed", extra={"entry_type": type(contact).__name__})
            records.append(ContactRecord())
            continue
        records.append(extract_entry(contact))
    return records
