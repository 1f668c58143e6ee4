"""Normalizer Windows Live: XML da Live Contacts API."""

from .extractor import extract_contacts
from .normalizer import parse_contacts_xml

__all__ = ["extract_contacts", "parse_contacts_xml"]
