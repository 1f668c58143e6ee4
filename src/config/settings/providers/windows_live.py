"""Settings de integracao com Windows Live (Delegated Authentication).

O secret e usado para derivar as chaves de assinatura (HMAC-SHA256) e
de criptografia (AES-128) do consent token.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings._env import read_optional_env


class WindowsLiveSettings(BaseModel):
    """Credenciais da aplicacao registrada no Windows Live."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    appid: str = Field(default="", description="Application id do Windows Live.")
    secret: str = Field(default="", description="Secret key (minimo 16 caracteres).")
    security_algorithm: str = Field(
        default="wsignin1.0",
        description="Algoritmo de seguranca declarado no registro.",
    )
    policy_url: str = Field(default="", description="URL da politica de privacidade.")
    return_url: str = Field(default="", description="URL que recebe o POST de consentimento.")
    consent_url: str = Field(
        default="https://consent.live.com/",
        description="Base do servico de consentimento.",
    )
    contacts_domain: str = Field(
        default="livecontacts.services.live.com",
        description="Host da Live Contacts API.",
    )
    offers: str = Field(default="Contacts.Invite", description="Offer solicitada no consentimento.")
    market: str | None = Field(default=None, description="Mercado/idioma da pagina de consentimento.")

    def validate_settings(self) -> list[str]:
        errors: list[str] = []
        if not self.appid:
            errors.append("WINDOWS_LIVE_APPID nao configurado")
        if len(self.secret) < 16:
            errors.append("WINDOWS_LIVE_SECRET deve ter ao menos 16 caracteres")
        if not self.policy_url:
            errors.append("WINDOWS_LIVE_POLICY_URL nao configurado")
        if not self.return_url:
            errors.append("WINDOWS_LIVE_RETURN_URL nao configurado")
        return errors


def _load_windows_live_from_env() -> WindowsLiveSettings:
    """Carrega WindowsLiveSettings a partir de variaveis de ambiente."""
    return WindowsLiveSettings(
        appid=os.getenv("WINDOWS_LIVE_APPID", ""),
        secret=os.getenv("WINDOWS_LIVE_SECRET", ""),
        security_algorithm=os.getenv("WINDOWS_LIVE_SECURITY_ALGORITHM", "wsignin1.0"),
        policy_url=os.getenv("WINDOWS_LIVE_POLICY_URL", ""),
        return_url=os.getenv("WINDOWS_LIVE_RETURN_URL", ""),
        market=read_optional_env("WINDOWS_LIVE_MARKET"),
    )


@lru_cache(maxsize=1)
def get_windows_live_settings() -> WindowsLiveSettings:
    """Retorna instancia cacheada de WindowsLiveSettings."""
    return _load_windows_live_from_env()


__all__ = ["WindowsLiveSettings", "get_windows_live_settings"]
