"""Extrator do XML da Live Contacts API.

    <LiveContacts><Contacts><Contact>
      <Profiles><Personal><FirstName/><LastName/></Personal></Profiles>
      <PreferredEmail>...</PreferredEmail>
    </Contact></Contacts></LiveContacts>

Nomes de elemento comparados sem diferenciar maiúsculas.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from api.normalizers._xml import child, child_text, children, parse_document
from api.normalizers.records import ContactRecord, join_name


def extract_entry(contact: ET.Element) -> ContactRecord:
    email = child_text(contact, "PreferredEmail")
    name = join_name(
        child_text(contact, "Profiles", "Personal", "FirstName"),
        child_text(contact, "Profiles", "Personal", "LastName"),
    )
    return ContactRecord(name=name, emails=[email] if email else [])


def extract_contacts(body: bytes) -> list[ContactRecord]:
    """Extrai os elementos Contact em ordem do documento.

    Raises:
        ParsingError: XML inválido ou raiz diferente de LiveContacts
    """
    root = parse_document(body, "LiveContacts")
    container = child(root, "Contacts")
    if container is None:
        return []
    return [extract_entry(contact) for contact in children(container, "Contact")]
