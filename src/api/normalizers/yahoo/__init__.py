"""Normalizer Yahoo: Address Book JSON e credenciais BBAuth."""

from .credentials import YahooCredentials, parse_credentials
from .extractor import extract_contacts
from .normalizer import parse_contacts_json

__all__ = [
    "YahooCredentials",
    "extract_contacts",
    "parse_contacts_json",
    "parse_credentials",
]
