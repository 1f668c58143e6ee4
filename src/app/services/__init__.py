"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.contact_import import ContactImportPipeline
from app.services.paginator import fetch_all

__all__ = [
    "ContactImportPipeline",
    "fetch_all",
]
