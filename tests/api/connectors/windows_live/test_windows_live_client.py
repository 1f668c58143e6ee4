"""Testes do connector Windows Live (URL de consentimento e Live Contacts)."""

from __future__ import annotations

import base64
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit

import pytest

from api.connectors.windows_live import WindowsLiveContactsClient
from app.infra.crypto import ConsentError, sign_token
from app.infra.http import HttpFetcher
from config.settings import WindowsLiveSettings
from tests.fakes.fake_transport import ScriptedTransport, raw_response

SETTINGS = WindowsLiveSettings(
    appid="000000004C00C0FF",
    secret="ApplicationKey123",
    policy_url="http://example.com/policy",
    return_url="http://example.com/consent",
)
CONTACTS = (
    b"<LiveContacts><Contacts><Contact>"
    b"<Profiles><Personal><FirstName>Rafael</FirstName><LastName>Timbo</LastName></Personal></Profiles>"
    b"<PreferredEmail>timbo@hotmail.com</PreferredEmail>"
    b"</Contact></Contacts></LiveContacts>"
)


def _client(transport: ScriptedTransport) -> WindowsLiveContactsClient:
    return WindowsLiveContactsClient(
        SETTINGS,
        fetcher=HttpFetcher("https://livecontacts.services.live.com", transport=transport),
        clock=lambda: 1218501215.0,
    )


def _consent_body() -> str:
    token = "delt=EwCoARAnAAAU&lid=8a3c2f1e0d9b7a65&offer=Contacts.Invite:Allow&exp=1218501215"
    return urlencode(
        {"action": "delauth", "ResponseCode": "RequestApproved", "ConsentToken": token}
    )


def test_authentication_url() -> None:
    url = urlsplit(_client(ScriptedTransport()).authentication_url(context="state-1"))
    assert (url.netloc, url.path) == ("consent.live.com", "/Delegation.aspx")

    query = dict(parse_qsl(url.query))
    assert query["ps"] == "Contacts.Invite"
    assert query["ru"] == "http://example.com/consent"
    assert query["pl"] == "http://example.com/policy"
    assert query["appctx"] == "state-1"
    assert "mkt" not in query

    body, _, signature = query["app"].partition("&sig=")
    assert body == "appid=000000004C00C0FF&ts=1218501215"
    assert unquote(signature) == base64.b64encode(sign_token(body, SETTINGS.secret)).decode()


def test_contacts_after_consent() -> None:
    transport = ScriptedTransport(raw_response(200, CONTACTS))
    client = _client(transport)
    contacts = client.contacts(_consent_body())

    assert [(c.name, c.email) for c in contacts] == [("Rafael Timbo", "timbo@hotmail.com")]
    assert transport.paths == ["/users/@L@8a3c2f1e0d9b7a65/rest/invitationsbyemail"]
    assert transport.requests[0].headers["Authorization"] == 'DelegatedToken dt="EwCoARAnAAAU"'
    assert client.consent is not None
    assert client.consent.offers == ("Contacts.Invite",)


def test_contacts_without_consent() -> None:
    with pytest.raises(ConsentError, match="consent_token_missing"):
        _client(ScriptedTransport()).contacts()
