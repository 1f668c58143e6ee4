"""Normalizer Google: feed Atom de contatos (gd:email)."""

from .extractor import extract_feed
from .normalizer import parse_contacts_feed

__all__ = ["extract_feed", "parse_contacts_feed"]
