"""Connector Google Contacts (AuthSub, ClientLogin e feed GData)."""

from .auth import authentication_url, authorization_header, client_login, session_token
from .client import GoogleContactsClient

__all__ = [
    "GoogleContactsClient",
    "authentication_url",
    "authorization_header",
    "client_login",
    "session_token",
]
