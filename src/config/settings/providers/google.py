"""Settings de integracao com Google Contacts (AuthSub/ClientLogin)."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings._env import parse_bool, read_optional_env

GOOGLE_DOMAIN = "www.google.com"
GOOGLE_FEEDS_PATH = "/m8/feeds/contacts/"
GOOGLE_DEFAULT_SCOPE = f"http://{GOOGLE_DOMAIN}{GOOGLE_FEEDS_PATH}"


class GoogleSettings(BaseModel):
    """Configuracoes do connector Google."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    domain: str = Field(default=GOOGLE_DOMAIN, description="Host das APIs Google.")
    scope: str = Field(
        default=GOOGLE_DEFAULT_SCOPE,
        description="Escopo AuthSub no qual o token resultante e valido.",
    )
    secure: bool = Field(
        default=False,
        description="Token seguro (apenas para dominios registrados).",
    )
    session: bool = Field(
        default=False,
        description="Token pode ser trocado por um session token.",
    )
    projection: str = Field(default="thin", description="Projecao do feed de contatos.")
    default_limit: int = Field(default=200, ge=1, description="max-results padrao.")
    account_type: str = Field(default="GOOGLE", description="accountType do ClientLogin.")
    service: str = Field(default="cp", description="Servico do ClientLogin.")
    source: str = Field(default="contacts-import", description="Origem do ClientLogin.")
    return_url: str | None = Field(
        default=None,
        description="URL para onde o Google redireciona apos autenticar.",
    )

    def validate_settings(self) -> list[str]:
        """Valida configuracoes minimas.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.projection not in {"thin", "full", "property-email"}:
            errors.append(f"GOOGLE_PROJECTION invalida: {self.projection}")
        return errors


def _load_google_from_env() -> GoogleSettings:
    """Carrega GoogleSettings a partir de variaveis de ambiente."""
    return GoogleSettings(
        scope=os.getenv("GOOGLE_AUTHSUB_SCOPE", GOOGLE_DEFAULT_SCOPE),
        secure=parse_bool(os.getenv("GOOGLE_AUTHSUB_SECURE", "false")),
        session=parse_bool(os.getenv("GOOGLE_AUTHSUB_SESSION", "false")),
        projection=os.getenv("GOOGLE_CONTACTS_PROJECTION", "thin"),
        default_limit=int(os.getenv("GOOGLE_CONTACTS_LIMIT", "200")),
        source=os.getenv("GOOGLE_CLIENT_LOGIN_SOURCE", "contacts-import"),
        return_url=read_optional_env("GOOGLE_RETURN_URL"),
    )


@lru_cache(maxsize=1)
def get_google_settings() -> GoogleSettings:
    """Retorna instancia cacheada de GoogleSettings."""
    return _load_google_from_env()


__all__ = [
    "GOOGLE_DEFAULT_SCOPE",
    "GOOGLE_DOMAIN",
    "GOOGLE_FEEDS_PATH",
    "GoogleSettings",
    "get_google_settings",
]
