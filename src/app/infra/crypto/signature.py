"""Assinaturas MD5 exigidas pelos providers legados.

Dois esquemas:
- Parâmetros ordenados (Flickr): md5(secret + k1 + v1 + k2 + v2 ...)
- Path + secret (Yahoo BBAuth): md5(path + secret), anexado como `&sig=`

MD5 é mantido apenas por compatibilidade de wire com os providers;
não reutilizar para integridade interna.
"""

from __future__ import annotations

import hashlib
import hmac
import re
import time
from collections.abc import Callable, Mapping

from app.infra.crypto.constants import MD5_HEX_LENGTH
from app.infra.crypto.errors import InvalidSignature

SECRET_PARAM = "secret"
SIGNATURE_PARAM = "sig"
API_SIGNATURE_PARAM = "api_sig"

_SIGNED_PATH_PATTERN = re.compile(rf"^(?P<path>.+)&{SIGNATURE_PARAM}=(?P<sig>\w{{{MD5_HEX_LENGTH}}})$")


def _md5_hex(text: str) -> str:
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def string_to_sign(params: Mapping[str, object], secret: str) -> str:
    """Concatena secret + pares chave/valor ordenados pela chave."""
    pairs = sorted(
        ((str(key), str(value)) for key, value in params.items() if str(key) != SECRET_PARAM),
        key=lambda pair: pair[0],
    )
    return secret + "".join(key + value for key, value in pairs)


def sign_params(params: Mapping[str, object], secret: str) -> str:
    """Assinatura hex de 32 caracteres sobre os parâmetros ordenados.

    Args:
        params: Parâmetros da chamada (a chave `secret`, se presente, é ignorada)
        secret: Shared secret da aplicação

    Returns:
        Digest MD5 hex
    """
    return _md5_hex(string_to_sign(params, secret))


def signed_params(
    params: Mapping[str, object],
    secret: str,
    *,
    signature_key: str = API_SIGNATURE_PARAM,
) -> dict[str, object]:
    """Retorna os parâmetros sem o secret e com a assinatura anexada ao final."""
    unsigned = {key: value for key, value in params.items() if key != SECRET_PARAM}
    unsigned[signature_key] = sign_params(unsigned, secret)
    return unsigned


def sign_path(path: str, secret: str) -> str:
    """md5(path + secret) em hex."""
    return _md5_hex(path + secret)


def append_signature(path: str, secret: str) -> str:
    """Anexa `&sig=<md5>` ao path."""
    return f"{path}&{SIGNATURE_PARAM}={sign_path(path, secret)}"


def validate_signed_path(target: str, secret: str) -> str:
    """Valida um path no formato `<path>&sig=<hex32>`.

    Args:
        target: Path do redirect recebido do provider
        secret: Shared secret da aplicação

    Returns:
        O path sem a assinatura

    Raises:
        InvalidSignature: Formato inválido ou assinatura divergente
    """
    match = _SIGNED_PATH_PATTERN.match(target)
    if match is None:
        raise InvalidSignature("signature_missing")

    path, received = match.group("path"), match.group("sig")
    if not hmac.compare_digest(sign_path(path, secret), received.lower()):
        raise InvalidSignature("signature_mismatch", signature=received)
    return path


def fill_template(template: str, **values: object) -> str:
    """Preenche placeholders `{nome}` de um template de path."""
    return template.format_map({key: str(value) for key, value in values.items()})


def unix_timestamp(clock: Callable[[], float] = time.time) -> int:
    """Timestamp Unix em segundos no momento da construção da URL."""
    return int(clock())
