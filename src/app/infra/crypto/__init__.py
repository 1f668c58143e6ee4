"""Assinatura e consentimento exigidos pelos providers de contatos.

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
- Connectors em api/ usam estas primitivas para montar URLs assinadas
"""

from .constants import DERIVED_KEY_SIZE, IV_SIZE
from .consent import (
    ConsentToken,
    application_verifier,
    derive_key,
    process_consent,
    process_consent_token,
    sign_token,
)
from .errors import ConsentError, InvalidSignature
from .signature import (
    append_signature,
    fill_template,
    sign_params,
    sign_path,
    signed_params,
    unix_timestamp,
    validate_signed_path,
)

__all__ = [
    "DERIVED_KEY_SIZE",
    "IV_SIZE",
    "ConsentError",
    "ConsentToken",
    "InvalidSignature",
    "append_signature",
    "application_verifier",
    "derive_key",
    "fill_template",
    "process_consent",
    "process_consent_token",
    "sign_params",
    "sign_path",
    "signed_params",
    "sign_token",
    "unix_timestamp",
    "validate_signed_path",
]
