"""Autenticação Google: AuthSub e ClientLogin.

Fluxo AuthSub:
1. authentication_url() → usuário autentica no Google
2. Google redireciona para `next` com ?token=<single-use>
3. session_token() troca o single-use por um session token (se session=True)

ClientLogin troca email/senha diretamente por um token `Auth=`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.query import build_query
from api.connectors.token_exchange import extract_value
from app.infra.http import FetchRequest, decode_body
from config.settings.providers.google import GoogleSettings

if TYPE_CHECKING:
    from app.protocols.contact_provider import FetcherProtocol

logger = logging.getLogger(__name__)

AUTHSUB_REQUEST_PATH = "/accounts/AuthSubRequest"
SESSION_TOKEN_PATH = "/accounts/AuthSubSessionToken"
CLIENT_LOGIN_PATH = "/accounts/ClientLogin"


def authentication_url(
    target: str | None,
    *,
    settings: GoogleSettings | None = None,
    **options: object,
) -> str:
    """URL AuthSub para onde o usuário deve ser enviado.

    Args:
        target: URL de retorno (`next`) que recebe o token
        settings: Defaults de scope/secure/session
        **options: Sobrescreve scope, secure ou session; None omite o par
    """
    config = settings or GoogleSettings()
    params: dict[str, object] = {
        "next": target,
        "scope": config.scope,
        "secure": config.secure,
        "session": config.session,
    }
    params.update(options)
    return f"https://{config.domain}{AUTHSUB_REQUEST_PATH}?{build_query(params)}"


def authorization_header(token: str, *, client_login: bool = False) -> str:
    if client_login:
        return f'GoogleLogin auth="{token}"'
    return f'AuthSub token="{token}"'


def session_token(token: str, fetcher: FetcherProtocol) -> str:
    """Troca um token AuthSub single-use por um session token.

    Raises:
        TokenNotFound: Resposta sem linha `Token=`
        FetchingError: Google recusou o token
    """
    response = fetcher.fetch(
        FetchRequest(SESSION_TOKEN_PATH, headers={"Authorization": authorization_header(token)})
    )
    session = extract_value(decode_body(response).decode("utf-8"), "Token")
    logger.info("google_session_token_obtained")
    return session


def client_login(
    email: str,
    password: str,
    fetcher: FetcherProtocol,
    *,
    settings: GoogleSettings | None = None,
) -> str:
    """Autentica com email/senha e retorna o token `Auth=`.

    Raises:
        TokenNotFound: Resposta sem linha `Auth=`
        FetchingError: Credenciais recusadas (403)
    """
    config = settings or GoogleSettings()
    form = build_query(
        {
            "accountType": config.account_type,
            "service": config.service,
            "source": config.source,
            "Email": email,
            "Passwd": password,
        }
    )
    response = fetcher.fetch(
        FetchRequest(
            CLIENT_LOGIN_PATH,
            method="POST",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            content=form.encode("ascii"),
        )
    )
    token = extract_value(decode_body(response).decode("utf-8"), "Auth")
    logger.info("google_client_login_succeeded", extra={"service": config.service})
    return token
