"""Connector Yahoo Address Book (BBAuth + JSON)."""

from .client import YahooContactsClient

__all__ = ["YahooContactsClient"]
