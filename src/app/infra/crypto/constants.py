"""Constantes criptográficas dos esquemas de assinatura dos providers."""

# Assinatura MD5 hex (Flickr api_sig, Yahoo BBAuth sig)
MD5_HEX_LENGTH = 32

# Windows Live Delegated Authentication
SIGNATURE_KEY_PREFIX = "SIGNATURE"
ENCRYPTION_KEY_PREFIX = "ENCRYPTION"
DERIVED_KEY_SIZE = 16  # 128 bits (AES-128 / chave HMAC)
IV_SIZE = 16  # bloco AES-CBC
