"""Normalizer do feed Google para ContactFeed."""

from __future__ import annotations

from api.normalizers.google.extractor import extract_feed
from api.normalizers.records import build_feed
from app.domain import ContactFeed


def parse_contacts_feed(body: bytes) -> ContactFeed:
    updated, records = extract_feed(body)
    return build_feed(records, updated, provider="google")
