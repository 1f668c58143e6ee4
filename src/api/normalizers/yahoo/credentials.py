"""Credenciais BBAuth retornadas por wspwtoken_login.

    <BBAuthTokenLoginResponse>
      <Success><Cookie>Y=...</Cookie><WSSID>...</WSSID></Success>
    </BBAuthTokenLoginResponse>
"""

from __future__ import annotations

from dataclasses import dataclass

from api.normalizers._xml import child_text, parse_document
from api.normalizers.errors import ParsingError


@dataclass(frozen=True, slots=True)
class YahooCredentials:
    """Par WSSID + Cookie exigido pela Address Book API."""

    wssid: str
    cookie: str


def parse_credentials(body: bytes) -> YahooCredentials:
    """Extrai WSSID e Cookie da resposta de login.

    Raises:
        ParsingError: Resposta sem Success/WSSID/Cookie
    """
    root = parse_document(body, "BBAuthTokenLoginResponse")
    wssid = child_text(root, "Success", "WSSID")
    cookie = child_text(root, "Success", "Cookie")
    if wssid is None or cookie is None:
        raise ParsingError("yahoo_credentials_incomplete")
    return YahooCredentials(wssid=wssid, cookie=cookie)
