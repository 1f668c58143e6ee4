"""Leitura de respostas `Chave=valor` das trocas de token.

Google AuthSubSessionToken e ClientLogin respondem com linhas
`Token=...`, `Auth=...`, `Expiration=...`.
"""

from __future__ import annotations

from utils.errors import TokenNotFound


def extract_value(body: str, key: str) -> str:
    """Retorna o valor da primeira linha `key=valor` do corpo.

    Raises:
        TokenNotFound: Nenhuma linha com a chave
    """
    prefix = f"{key}="
    for line in body.splitlines():
        stripped = line.strip()
        if stripped.startswith(prefix):
            return stripped[len(prefix):]
    raise TokenNotFound(key)
