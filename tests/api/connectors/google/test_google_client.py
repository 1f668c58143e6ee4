"""Testes do connector Google: AuthSub, ClientLogin e feed de contatos."""

from __future__ import annotations

import gzip
from urllib.parse import parse_qsl, urlsplit

import pytest

from api.connectors.google import (
    GoogleContactsClient,
    authentication_url,
    client_login,
    session_token,
)
from app.infra.http import FetchingError, HttpFetcher
from config.settings import GoogleSettings
from tests.fakes.fake_transport import ScriptedTransport, raw_response
from utils.errors import TokenNotFound

FEED = b"""<feed xmlns='http://www.w3.org/2005/Atom' xmlns:gd='http://schemas.google.com/g/2005'>
  <updated>2008-03-05T12:36:38.836Z</updated>
  <entry><title>Fitzgerald</title><gd:email address='fubar@gmail.com'/></entry>
</feed>"""


def _fetcher(transport: ScriptedTransport) -> HttpFetcher:
    return HttpFetcher("https://www.google.com", transport=transport)


def _client(transport: ScriptedTransport, **kwargs: object) -> GoogleContactsClient:
    return GoogleContactsClient("dummytoken", fetcher=_fetcher(transport), **kwargs)  # type: ignore[arg-type]


def _feed_response(body: bytes = FEED) -> object:
    return raw_response(200, gzip.compress(body), {"Content-Encoding": "gzip"})


class TestAuthenticationUrl:
    def test_default_parameters(self) -> None:
        url = urlsplit(authentication_url("http://example.com/invite"))
        assert url.scheme == "https"
        assert url.netloc == "www.google.com"
        assert url.path == "/accounts/AuthSubRequest"
        assert sorted(url.query.split("&")) == [
            "next=http%3A%2F%2Fexample.com%2Finvite",
            "scope=http%3A%2F%2Fwww.google.com%2Fm8%2Ffeeds%2Fcontacts%2F",
            "secure=0",
            "session=0",
        ]

    def test_boolean_parameters(self) -> None:
        pairs = authentication_url(None, secure=True, session=True).split("?")[1].split("&")
        assert "secure=1" in pairs
        assert "session=1" in pairs

    def test_none_values_are_skipped(self) -> None:
        query = authentication_url(None, secure=None).split("?")[1]
        assert "next" not in query
        assert "secure" not in query


def test_session_token_exchange() -> None:
    transport = ScriptedTransport(raw_response(200, b"Token=G25aZ-v_8B\nExpiration=20061004T123456Z"))
    assert session_token("dummytoken", _fetcher(transport)) == "G25aZ-v_8B"

    request = transport.requests[0]
    assert request.url.path == "/accounts/AuthSubSessionToken"
    assert request.headers["Authorization"] == 'AuthSub token="dummytoken"'


def test_session_token_missing_line() -> None:
    transport = ScriptedTransport(raw_response(200, b"Expiration=20061004T123456Z"))
    with pytest.raises(TokenNotFound):
        session_token("dummytoken", _fetcher(transport))


def test_client_login() -> None:
    transport = ScriptedTransport(
        raw_response(200, b"SID=klw4pHhL_ry4jl6\nLSID=Ij6k-7Ypnc1sxm\nAuth=EuoqMSjN5uo-3B")
    )
    token = client_login("mislav@example.com", "dummyPassword", _fetcher(transport))
    assert token == "EuoqMSjN5uo-3B"

    request = transport.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/accounts/ClientLogin"
    assert dict(parse_qsl(request.content.decode())) == {
        "accountType": "GOOGLE",
        "service": "cp",
        "source": "contacts-import",
        "Email": "mislav@example.com",
        "Passwd": "dummyPassword",
    }


def test_client_login_rejected() -> None:
    transport = ScriptedTransport(raw_response(403, b"Error=BadAuthentication"))
    with pytest.raises(FetchingError):
        client_login("mislav@example.com", "wrong", _fetcher(transport))


class TestContactsFeed:
    def test_headers_for_client_login_token(self) -> None:
        client = _client(ScriptedTransport(), client_login=True)
        assert client.headers["Authorization"] == 'GoogleLogin auth="dummytoken"'

    def test_contacts_request_path(self) -> None:
        transport = ScriptedTransport(_feed_response())
        contacts = _client(transport).contacts()

        assert [c.email for c in contacts] == ["fubar@gmail.com"]
        assert transport.paths == ["/m8/feeds/contacts/default/thin?max-results=200"]
        headers = transport.requests[0].headers
        assert headers["Authorization"] == 'AuthSub token="dummytoken"'
        assert headers["Accept-Encoding"] == "gzip"

    def test_user_is_escaped_and_params_translated(self) -> None:
        transport = ScriptedTransport(_feed_response())
        client = _client(transport, user="example@gmail.com", settings=GoogleSettings(projection="full"))
        client.contacts(limit=5, offset=10, order="lastmodified")

        assert transport.paths == [
            "/m8/feeds/contacts/example%40gmail.com/full"
            "?max-results=5&start-index=11&orderby=lastmodified&sortorder=descending"
        ]

    def test_updated_at_tracks_last_feed(self) -> None:
        client = _client(ScriptedTransport(_feed_response()))
        assert client.updated_at is None
        client.contacts()
        assert client.updated_at_string == "2008-03-05T12:36:38.836Z"
        assert client.updated_at is not None

    def test_all_contacts_paginates(self) -> None:
        entry = "<entry><title>P{0}</title><gd:email address='p{0}@example.com'/></entry>"
        page = FEED.replace(
            b"<entry><title>Fitzgerald</title><gd:email address='fubar@gmail.com'/></entry>",
            "".join(entry.format(i) for i in range(2)).encode(),
        )
        empty = FEED.replace(
            b"<entry><title>Fitzgerald</title><gd:email address='fubar@gmail.com'/></entry>", b""
        )
        transport = ScriptedTransport(_feed_response(page), _feed_response(empty))
        contacts = _client(transport).all_contacts(chunk_size=2)

        assert len(contacts) == 2
        assert [dict(parse_qsl(urlsplit(p).query))["start-index"] for p in transport.paths] == [
            "1",
            "3",
        ]

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ValueError):
            GoogleContactsClient(" ", fetcher=_fetcher(ScriptedTransport()))
