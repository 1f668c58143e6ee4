"""Normalizer do JSON Yahoo para ContactFeed."""

from __future__ import annotations

from api.normalizers.records import build_feed
from api.normalizers.yahoo.extractor import extract_contacts
from app.domain import ContactFeed


def parse_contacts_json(body: bytes) -> ContactFeed:
    # a Address Book API não expõe timestamp de atualização
    return build_feed(extract_contacts(body), provider="yahoo")
