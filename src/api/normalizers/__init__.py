"""Normalizers por provider: conversão de feeds externos para Contact.

Estrutura:
- google/: feed Atom (gd:email)
- yahoo/: Address Book JSON e credenciais BBAuth
- windows_live/: XML da Live Contacts API
- flickr/: envelope REST (frob, token)
- records.py: registro intermediário e montagem do ContactFeed

Cada provider tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .errors import ParsingError
from .google import parse_contacts_feed
from .windows_live import parse_contacts_xml
from .yahoo import parse_contacts_json

__all__ = [
    "ParsingError",
    "parse_contacts_feed",
    "parse_contacts_json",
    "parse_contacts_xml",
]
