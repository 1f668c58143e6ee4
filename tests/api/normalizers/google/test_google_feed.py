"""Testes do parser do feed Atom de contatos Google."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from api.normalizers import ParsingError
from api.normalizers.google import extract_feed, parse_contacts_feed

FEED = b"""<?xml version='1.0' encoding='UTF-8'?>
<feed xmlns='http://www.w3.org/2005/Atom'
      xmlns:openSearch='http://a9.com/-/spec/opensearchrss/1.0/'
      xmlns:gd='http://schemas.google.com/g/2005'>
  <id>http://www.google.com/m8/feeds/contacts/example%40gmail.com/thin</id>
  <updated>2008-03-05T12:36:38.836Z</updated>
  <title type='text'>Contacts</title>
  <author><name>Example</name><email>example@gmail.com</email></author>
  <openSearch:totalResults>4</openSearch:totalResults>
  <entry>
    <title type='text'>Fitzgerald</title>
    <gd:email rel='http://schemas.google.com/g/2005#other' address='fubar@gmail.com'/>
  </entry>
  <entry>
    <title type='text'></title>
    <gd:email rel='http://schemas.google.com/g/2005#home' address='one@example.com'/>
    <gd:email rel='http://schemas.google.com/g/2005#work' address='two@example.com'/>
  </entry>
  <entry>
    <title type='text'>No Email Person</title>
  </entry>
  <entry>
    <title type='text'>Max Power</title>
    <gd:email rel='http://schemas.google.com/g/2005#other' address='max@example.com'/>
  </entry>
</feed>
"""


def test_parses_contacts_in_document_order() -> None:
    feed = parse_contacts_feed(FEED)
    assert [c.name for c in feed.contacts] == ["Fitzgerald", None, "Max Power"]
    assert feed.contacts[0].email == "fubar@gmail.com"


def test_entry_without_name_keeps_all_emails_in_order() -> None:
    contact = parse_contacts_feed(FEED).contacts[1]
    assert contact.name is None
    assert contact.emails == ("one@example.com", "two@example.com")


def test_entry_with_name_but_no_email_is_skipped() -> None:
    feed = parse_contacts_feed(FEED)
    assert "No Email Person" not in [c.name for c in feed.contacts]
    assert feed.skipped == 1


def test_updated_literal_and_lazy_parse() -> None:
    feed = parse_contacts_feed(FEED)
    assert feed.updated_at_string == "2008-03-05T12:36:38.836Z"
    assert feed.updated_at == datetime(2008, 3, 5, 12, 36, 38, 836000, tzinfo=UTC)


def test_malformed_updated_does_not_break_parse() -> None:
    body = FEED.replace(b"2008-03-05T12:36:38.836Z", b"yesterday")
    feed = parse_contacts_feed(body)
    assert feed.updated_at_string == "yesterday"
    assert feed.updated_at is None
    assert len(feed.contacts) == 3


def test_extract_feed_returns_raw_records() -> None:
    updated, records = extract_feed(FEED)
    assert updated == "2008-03-05T12:36:38.836Z"
    assert len(records) == 4
    assert records[2].emails == []


def test_empty_feed() -> None:
    feed = parse_contacts_feed(b"<feed xmlns='http://www.w3.org/2005/Atom'/>")
    assert feed.contacts == ()
    assert feed.updated_at_string is None


@pytest.mark.parametrize("body", [b"<feed><entry>", b"<html><body/></html>"])
def test_invalid_document_raises(body: bytes) -> None:
    with pytest.raises(ParsingError):
        parse_contacts_feed(body)
