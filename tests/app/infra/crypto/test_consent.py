"""Testes do consentimento delegado Windows Live (AES-128-CBC + HMAC-SHA256)."""

from __future__ import annotations

import base64
import hashlib
import hmac
import os
from urllib.parse import quote, unquote, urlencode

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from app.infra.crypto import (
    ConsentError,
    InvalidSignature,
    application_verifier,
    derive_key,
    process_consent,
    process_consent_token,
    sign_token,
)

SECRET = "ApplicationKey123"
LOCATION_ID = "8a3c2f1e0d9b7a65"


def _b64(raw: bytes) -> str:
    return quote(base64.b64encode(raw).decode("ascii"), safe="")


def _consent_fields(**overrides: str) -> str:
    fields = {
        "delt": "EwCoARAnAAAU",
        "reft": "refresh-token",
        "skey": _b64(b"session-key-0123"),
        "exp": "1218501215",
        "offer": "Contacts.Invite:Allow",
        "lid": LOCATION_ID,
    }
    fields.update(overrides)
    return "&".join(f"{key}={value}" for key, value in fields.items() if value)


def _encrypt(plaintext: str, secret: str = SECRET) -> str:
    iv = os.urandom(16)
    padder = padding.PKCS7(128).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
    encryptor = Cipher(algorithms.AES(derive_key("ENCRYPTION", secret)), modes.CBC(iv)).encryptor()
    return _b64(iv + encryptor.update(padded) + encryptor.finalize())


def _signed(body: str, secret: str = SECRET) -> str:
    return f"{body}&sig={_b64(sign_token(body, secret))}"


def _consent_token(body: str | None = None) -> str:
    return "eact=" + quote(_encrypt(_signed(body or _consent_fields())), safe="")


def test_derive_key_is_truncated_sha256() -> None:
    expected = hashlib.sha256(b"SIGNATURE" + SECRET.encode()).digest()[:16]
    assert derive_key("SIGNATURE", SECRET) == expected
    assert len(derive_key("ENCRYPTION", SECRET)) == 16


def test_application_verifier_is_signed_and_escaped() -> None:
    verifier = unquote(application_verifier("app-id", SECRET, 1218501215))
    body, _, sig = verifier.partition("&sig=")
    assert body == "appid=app-id&ts=1218501215"
    expected = hmac.new(derive_key("SIGNATURE", SECRET), body.encode(), hashlib.sha256).digest()
    assert base64.b64decode(unquote(sig)) == expected


def test_process_encrypted_consent_token() -> None:
    consent = process_consent_token(_consent_token(), SECRET, context="ctx")
    assert consent.delegation_token == "EwCoARAnAAAU"
    assert consent.location_id == LOCATION_ID
    assert consent.refresh_token == "refresh-token"
    assert consent.session_key == b"session-key-0123"
    assert consent.expiry == 1218501215
    assert consent.offers == ("Contacts.Invite",)
    assert consent.context == "ctx"
    assert consent.authorization_header == 'DelegatedToken dt="EwCoARAnAAAU"'


def test_process_plain_consent_token() -> None:
    consent = process_consent_token(_consent_fields(), SECRET)
    assert consent.location_id == LOCATION_ID


def test_tampered_signature_is_rejected() -> None:
    forged = f"{_consent_fields()}&sig={_b64(b'0' * 32)}"
    token = "eact=" + quote(_encrypt(forged), safe="")
    with pytest.raises(InvalidSignature):
        process_consent_token(token, SECRET)


def test_wrong_secret_is_rejected() -> None:
    with pytest.raises((ConsentError, InvalidSignature)):
        process_consent_token(_consent_token(), "AnotherKey456789")


def test_missing_location_id_is_consent_error() -> None:
    token = "eact=" + quote(_encrypt(_signed(_consent_fields(lid=""))), safe="")
    with pytest.raises(ConsentError, match="consent_token_incomplete"):
        process_consent_token(token, SECRET)


def test_empty_token_is_consent_error() -> None:
    with pytest.raises(ConsentError, match="consent_token_empty"):
        process_consent_token("  ", SECRET)


def test_process_consent_post_body() -> None:
    body = urlencode(
        {
            "action": "delauth",
            "ResponseCode": "RequestApproved",
            "ConsentToken": _consent_token(),
            "appctx": "state-1",
        }
    )
    consent = process_consent(body, SECRET)
    assert consent.location_id == LOCATION_ID
    assert consent.context == "state-1"


def test_process_consent_rejected_by_user() -> None:
    body = urlencode({"action": "delauth", "ResponseCode": "RequestRejected"})
    with pytest.raises(ConsentError, match="consent_not_approved"):
        process_consent(body, SECRET)
