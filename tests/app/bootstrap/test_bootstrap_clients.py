"""Testes do composition root: factories e validação de settings."""

from __future__ import annotations

import logging

import pytest

from api.connectors import GoogleContactsClient, YahooContactsClient
from app.bootstrap import (
    create_fetcher,
    create_flickr_client,
    create_google_client,
    create_windows_live_client,
    create_yahoo_client,
    validate_runtime_settings,
)
from app.bootstrap.clients import create_diagnostics_logger
from app.infra.http import FetchRequest
from config.settings import HttpSettings
from tests.fakes.fake_transport import ScriptedTransport, raw_response

FEED = b"""<feed xmlns='http://www.w3.org/2005/Atom' xmlns:gd='http://schemas.google.com/g/2005'>
  <updated>2008-03-05T12:36:38.836Z</updated>
  <entry><title>Fitzgerald</title><gd:email address='fubar@gmail.com'/></entry>
</feed>"""


def test_create_fetcher_sends_user_agent() -> None:
    transport = ScriptedTransport(raw_response(200, b"ok"))
    fetcher = create_fetcher(
        "https://example.com",
        HttpSettings(user_agent="importer-test/2.0"),
        transport=transport,
    )
    fetcher.fetch(FetchRequest("/"))
    assert transport.requests[0].headers["User-Agent"] == "importer-test/2.0"
    assert transport.requests[0].headers["Accept-Encoding"] == "identity"


def test_diagnostics_logger_follows_verbose_flag() -> None:
    assert create_diagnostics_logger(HttpSettings()) is None
    diagnostics = create_diagnostics_logger(HttpSettings(verbose=True))
    assert diagnostics is not None
    assert diagnostics.level == logging.DEBUG


def test_create_google_client_uses_env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_CONTACTS_PROJECTION", "full")
    monkeypatch.setenv("GOOGLE_CONTACTS_LIMIT", "50")
    transport = ScriptedTransport(raw_response(200, FEED))

    client = create_google_client("dummytoken", transport=transport)
    contacts = client.contacts()

    assert isinstance(client, GoogleContactsClient)
    assert [c.email for c in contacts] == ["fubar@gmail.com"]
    assert transport.requests[0].url.host == "www.google.com"
    assert transport.paths == ["/m8/feeds/contacts/default/full?max-results=50"]


def test_create_yahoo_client_hosts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YAHOO_APPID", "app")
    monkeypatch.setenv("YAHOO_SECRET", "secret")

    client = create_yahoo_client(transport=ScriptedTransport())

    assert isinstance(client, YahooContactsClient)
    assert client.authentication_url().startswith(
        "https://api.login.yahoo.com/WSLogin/V1/wslogin?appid=app&ts="
    )


def test_create_flickr_client_targets_api_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLICKR_API_KEY", "key")
    monkeypatch.setenv("FLICKR_SECRET", "secret")
    transport = ScriptedTransport(raw_response(200, b'<rsp stat="ok"><frob>1-2</frob></rsp>'))

    assert create_flickr_client(transport=transport).frob() == "1-2"
    assert str(transport.requests[0].url).startswith("http://api.flickr.com/services/rest/?")


def test_create_windows_live_client_builds_consent_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WINDOWS_LIVE_APPID", "000000004C00C0FF")
    monkeypatch.setenv("WINDOWS_LIVE_SECRET", "ApplicationKey123")

    url = create_windows_live_client(transport=ScriptedTransport()).authentication_url()
    assert url.startswith("https://consent.live.com/Delegation.aspx?ps=Contacts.Invite")


class TestValidateRuntimeSettings:
    def test_defaults_are_valid_without_providers(self) -> None:
        assert validate_runtime_settings() == []

    def test_missing_provider_credentials(self) -> None:
        errors = validate_runtime_settings(("yahoo", "flickr"))
        assert "yahoo: YAHOO_APPID nao configurado" in errors
        assert "flickr: FLICKR_SECRET nao configurado" in errors

    def test_configured_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YAHOO_APPID", "app")
        monkeypatch.setenv("YAHOO_SECRET", "secret")
        assert validate_runtime_settings(("yahoo",)) == []

    def test_invalid_http_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")
        assert validate_runtime_settings() == ["http: HTTP_TIMEOUT_SECONDS deve ser > 0"]

    def test_unknown_provider(self) -> None:
        assert validate_runtime_settings(("myspace",)) == ["myspace: provider desconhecido"]
