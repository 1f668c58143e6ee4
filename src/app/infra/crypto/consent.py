"""Windows Live Delegated Authentication.

Chaves derivadas do secret da aplicação:
- assinatura: SHA256("SIGNATURE" + secret)[:16] (HMAC-SHA256)
- criptografia: SHA256("ENCRYPTION" + secret)[:16] (AES-128-CBC)

O consent token chega no POST de retorno. Quando traz o campo `eact`,
o conteúdo é base64(IV + ciphertext) e o texto decifrado termina com
`&sig=<base64(HMAC)>` sobre o restante.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, unquote

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from app.infra.crypto.constants import (
    DERIVED_KEY_SIZE,
    ENCRYPTION_KEY_PREFIX,
    IV_SIZE,
    SIGNATURE_KEY_PREFIX,
)
from app.infra.crypto.errors import ConsentError, InvalidSignature

logger = logging.getLogger(__name__)

_SIGNATURE_SEPARATOR = "&sig="
_APPROVED_ACTION = "delauth"
_APPROVED_RESPONSE = "RequestApproved"


@dataclass(frozen=True, slots=True)
class ConsentToken:
    """Consentimento delegado já validado.

    `location_id` é o LID hex usado no path da Live Contacts API.
    """

    delegation_token: str
    location_id: str
    refresh_token: str | None = None
    session_key: bytes | None = None
    expiry: int | None = None
    offers: tuple[str, ...] = ()
    context: str | None = None

    @property
    def authorization_header(self) -> str:
        return f'DelegatedToken dt="{self.delegation_token}"'


def derive_key(prefix: str, secret: str) -> bytes:
    """SHA256(prefix + secret) truncado em 16 bytes."""
    return hashlib.sha256((prefix + secret).encode("utf-8")).digest()[:DERIVED_KEY_SIZE]


def sign_token(token: str, secret: str) -> bytes:
    """HMAC-SHA256 do token com a chave de assinatura derivada."""
    key = derive_key(SIGNATURE_KEY_PREFIX, secret)
    return hmac.new(key, token.encode("utf-8"), hashlib.sha256).digest()


def _encode_base64(raw: bytes) -> str:
    return quote(base64.b64encode(raw).decode("ascii"), safe="")


def _decode_base64(value: str) -> bytes:
    try:
        return base64.b64decode(unquote(value), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise ConsentError(f"consent_invalid_base64: {exc}") from exc


def application_verifier(appid: str, secret: str, timestamp: int) -> str:
    """Verifier `appid=..&ts=..&sig=..` já escapado para uso em query."""
    token = f"appid={appid}&ts={timestamp}"
    token += _SIGNATURE_SEPARATOR + _encode_base64(sign_token(token, secret))
    return quote(token, safe="")


def _parse_pairs(text: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for pair in text.split("&"):
        key, separator, value = pair.partition("=")
        if key and separator:
            pairs[key] = unquote(value)
    return pairs


def decrypt_token(encoded: str, secret: str) -> str:
    """Decifra base64(IV + ciphertext) com AES-128-CBC/PKCS7.

    Raises:
        ConsentError: Base64 inválido, tamanho inválido ou padding corrompido
    """
    raw = _decode_base64(encoded)
    iv, crypted = raw[:IV_SIZE], raw[IV_SIZE:]
    if len(iv) != IV_SIZE or not crypted or len(crypted) % IV_SIZE:
        raise ConsentError("consent_invalid_ciphertext_length")

    key = derive_key(ENCRYPTION_KEY_PREFIX, secret)
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    try:
        padded = decryptor.update(crypted) + decryptor.finalize()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except (ValueError, UnicodeDecodeError) as exc:
        raise ConsentError(f"consent_decryption_failed: {exc}") from exc


def validate_token(token: str, secret: str) -> str:
    """Confere o trailer `&sig=` e retorna o corpo assinado.

    Raises:
        InvalidSignature: Trailer ausente ou HMAC divergente
    """
    body, separator, signature = token.rpartition(_SIGNATURE_SEPARATOR)
    if not separator or not body:
        raise InvalidSignature("consent_signature_missing")

    expected = sign_token(body, secret)
    try:
        received = _decode_base64(signature)
    except ConsentError as exc:
        raise InvalidSignature("consent_signature_malformed", signature=signature) from exc
    if not hmac.compare_digest(expected, received):
        raise InvalidSignature("consent_signature_mismatch", signature=signature)
    return body


def _parse_offers(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(offer.split(":", 1)[0] for offer in unquote(raw).split(";") if offer)


def _parse_expiry(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("consent_expiry_invalid", extra={"expiry": raw})
        return None


def process_consent_token(token: str, secret: str, context: str | None = None) -> ConsentToken:
    """Decodifica e valida um consent token.

    Args:
        token: Valor do campo ConsentToken
        secret: Secret da aplicação Windows Live
        context: appctx devolvido pelo serviço de consentimento

    Returns:
        ConsentToken com delegation token e LID

    Raises:
        ConsentError: Token vazio ou sem `delt`/`lid`
        InvalidSignature: Assinatura do token não confere
    """
    if not token or not token.strip():
        raise ConsentError("consent_token_empty")

    fields = _parse_pairs(unquote(token.strip()))
    encrypted = fields.get("eact")
    if encrypted:
        fields = _parse_pairs(validate_token(decrypt_token(encrypted, secret), secret))

    delegation_token = fields.get("delt")
    location_id = fields.get("lid")
    if not delegation_token or not location_id:
        raise ConsentError("consent_token_incomplete")

    session_key = fields.get("skey")
    return ConsentToken(
        delegation_token=delegation_token,
        location_id=location_id,
        refresh_token=fields.get("reft") or None,
        session_key=_decode_base64(session_key) if session_key else None,
        expiry=_parse_expiry(fields.get("exp")),
        offers=_parse_offers(fields.get("offer")),
        context=context,
    )


def process_consent(body: str, secret: str) -> ConsentToken:
    """Processa o corpo do POST de retorno do serviço de consentimento.

    Raises:
        ConsentError: Consentimento recusado ou payload incompleto
        InvalidSignature: Assinatura do token não confere
    """
    fields = dict(parse_qsl(body.strip(), keep_blank_values=True))
    if fields.get("action") != _APPROVED_ACTION:
        raise ConsentError(f"consent_unexpected_action: {fields.get('action')}")
    if fields.get("ResponseCode") != _APPROVED_RESPONSE:
        raise ConsentError(f"consent_not_approved: {fields.get('ResponseCode')}")

    return process_consent_token(
        fields.get("ConsentToken", ""),
        secret,
        context=fields.get("appctx") or None,
    )
