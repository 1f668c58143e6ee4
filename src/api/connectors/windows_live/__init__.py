"""Connector Windows Live Contacts (consent token + XML)."""

from .client import WindowsLiveContactsClient

__all__ = ["WindowsLiveContactsClient"]
