"""Connectors por provider de contatos.

Estrutura:
- google/: AuthSub / ClientLogin + feed Atom GData
- yahoo/: BBAuth (path assinado) + Address Book JSON
- flickr/: handshake por frob com chamadas assinadas (api_sig)
- windows_live/: Delegated Authentication + Live Contacts XML
- query.py: tradução declarativa de parâmetros lógicos para query string
- token_exchange.py: leitura de respostas `Chave=valor`

Cada provider tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

from .flickr import FlickrAuthClient
from .google import GoogleContactsClient
from .windows_live import WindowsLiveContactsClient
from .yahoo import YahooContactsClient

__all__ = [
    "FlickrAuthClient",
    "GoogleContactsClient",
    "WindowsLiveContactsClient",
    "YahooContactsClient",
]
