"""Normalizer do XML Windows Live para ContactFeed."""

from __future__ import annotations

from api.normalizers.records import build_feed
from api.normalizers.windows_live.extractor import extract_contacts
from app.domain import ContactFeed


def parse_contacts_xml(body: bytes) -> ContactFeed:
    return build_feed(extract_contacts(body), provider="windows_live")
