"""Protocolos e contratos do core da aplicação."""

from .contact_provider import ContactProviderProtocol, FetcherProtocol, ProviderAuthProtocol

__all__ = [
    "ContactProviderProtocol",
    "FetcherProtocol",
    "ProviderAuthProtocol",
]
