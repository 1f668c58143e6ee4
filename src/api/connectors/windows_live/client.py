"""Connector Windows Live Contacts (Delegated Authentication).

Fluxo:
1. authentication_url() → página de consentimento do Windows Live
2. O serviço faz POST na return_url com o ConsentToken
3. process_consent(body) valida/decifra; contacts() busca a agenda
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from api.connectors.query import build_query
from api.normalizers.windows_live import parse_contacts_xml
from app.domain import ContactFeed
from app.infra.crypto import (
    ConsentError,
    ConsentToken,
    application_verifier,
    process_consent,
    unix_timestamp,
)
from app.infra.http import FetchRequest
from app.services.contact_import import ContactImportPipeline
from config.settings.providers.windows_live import WindowsLiveSettings

if TYPE_CHECKING:
    from app.domain import Contact
    from app.protocols.contact_provider import FetcherProtocol

logger = logging.getLogger(__name__)

DELEGATION_PATH = "Delegation.aspx"
CONTACTS_PATH = "/users/@L@{location_id}/rest/invitationsbyemail"


class WindowsLiveContactsClient:
    """Cliente Delegated Auth + Live Contacts de uma aplicação.

    Args:
        settings: appid, secret, return/policy URLs e offers
        fetcher: Transporte para https://livecontacts.services.live.com
        clock: Fonte do timestamp do application verifier
        diagnostics: Logger de diagnóstico do fetcher
    """

    provider = "windows_live"

    def __init__(
        self,
        settings: WindowsLiveSettings,
        *,
        fetcher: FetcherProtocol,
        clock: Callable[[], float] = time.time,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._pipeline = ContactImportPipeline(self, fetcher, diagnostics=diagnostics)
        self._consent: ConsentToken | None = None

    @property
    def consent(self) -> ConsentToken | None:
        return self._consent

    def authentication_url(self, context: str | None = None) -> str:
        """URL da página de consentimento (offer Contacts.Invite)."""
        query = build_query(
            {
                "ps": self._settings.offers,
                "ru": self._settings.return_url,
                "pl": self._settings.policy_url,
            }
        )
        verifier = application_verifier(
            self._settings.appid,
            self._settings.secret,
            unix_timestamp(self._clock),
        )
        query += f"&app={verifier}"
        extra = build_query({"appctx": context, "mkt": self._settings.market})
        if extra:
            query += f"&{extra}"
        return f"{self._settings.consent_url}{DELEGATION_PATH}?{query}"

    def sign_params(self, params: Mapping[str, object]) -> dict[str, object]:
        # o delegation token vai no header Authorization
        return dict(params)

    def process_consent(self, body: str) -> ConsentToken:
        """Valida o POST de consentimento e guarda o token para contacts().

        Raises:
            ConsentError: Consentimento recusado ou incompleto
            InvalidSignature: Token adulterado
        """
        self._consent = process_consent(body, self._settings.secret)
        logger.info("windows_live_consent_processed", extra={"offers": list(self._consent.offers)})
        return self._consent

    def translate_params(self, params: Mapping[str, object]) -> str:
        return build_query(params)

    def contacts_request(self, params: Mapping[str, object]) -> FetchRequest:
        if self._consent is None:
            raise ConsentError("consent_token_missing")
        path = CONTACTS_PATH.format(location_id=self._consent.location_id)
        query = self.translate_params(self.sign_params(params))
        return FetchRequest(
            f"{path}?{query}" if query else path,
            headers={"Authorization": self._consent.authorization_header},
        )

    def parse_feed(self, body: bytes) -> ContactFeed:
        return parse_contacts_xml(body)

    def contacts(self, consent_body: str | None = None) -> list[Contact]:
        """Busca a agenda; processa o POST de consentimento quando informado."""
        if consent_body is not None:
            self.process_consent(consent_body)
        return list(self._pipeline.run({}).contacts)
