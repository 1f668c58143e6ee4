"""Settings de integracao com Flickr (API assinada)."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class FlickrSettings(BaseModel):
    """Chave e secret da aplicacao Flickr."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    api_key: str = Field(default="", description="API key da aplicacao.")
    secret: str = Field(default="", description="Shared secret usado na assinatura.")
    perms: str = Field(default="read", description="Permissao solicitada ao usuario.")

    def validate_settings(self) -> list[str]:
        errors: list[str] = []
        if not self.api_key:
            errors.append("FLICKR_API_KEY nao configurado")
        if not self.secret:
            errors.append("FLICKR_SECRET nao configurado")
        if self.perms not in {"read", "write", "delete"}:
            errors.append(f"FLICKR_PERMS invalido: {self.perms}")
        return errors


def _load_flickr_from_env() -> FlickrSettings:
    """Carrega FlickrSettings a partir de variaveis de ambiente."""
    return FlickrSettings(
        api_key=os.getenv("FLICKR_API_KEY", ""),
        secret=os.getenv("FLICKR_SECRET", ""),
        perms=os.getenv("FLICKR_PERMS", "read"),
    )


@lru_cache(maxsize=1)
def get_flickr_settings() -> FlickrSettings:
    """Retorna instancia cacheada de FlickrSettings."""
    return _load_flickr_from_env()


__all__ = ["FlickrSettings", "get_flickr_settings"]
