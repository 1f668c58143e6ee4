"""Settings de integracao com Yahoo Address Book (BBAuth)."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class YahooSettings(BaseModel):
    """Credenciais da aplicacao registrada no Yahoo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    appid: str = Field(default="", description="Application id registrado no BBAuth.")
    secret: str = Field(default="", description="Shared secret do BBAuth.")
    auth_domain: str = Field(
        default="api.login.yahoo.com",
        description="Host de autenticacao BBAuth (HTTPS).",
    )
    address_book_domain: str = Field(
        default="address.yahooapis.com",
        description="Host da Address Book API.",
    )

    def validate_settings(self) -> list[str]:
        errors: list[str] = []
        if not self.appid:
            errors.append("YAHOO_APPID nao configurado")
        if not self.secret:
            errors.append("YAHOO_SECRET nao configurado")
        return errors


def _load_yahoo_from_env() -> YahooSettings:
    """Carrega YahooSettings a partir de variaveis de ambiente."""
    return YahooSettings(
        appid=os.getenv("YAHOO_APPID", ""),
        secret=os.getenv("YAHOO_SECRET", ""),
    )


@lru_cache(maxsize=1)
def get_yahoo_settings() -> YahooSettings:
    """Retorna instancia cacheada de YahooSettings."""
    return _load_yahoo_from_env()


__all__ = ["YahooSettings", "get_yahoo_settings"]
