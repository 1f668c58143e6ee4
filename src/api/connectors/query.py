"""Montagem de query strings a partir de parâmetros lógicos.

Cada provider declara uma tabela de `ParamRule` que traduz nomes lógicos
(limit, offset, order...) para os nomes de wire. Chaves fora da tabela
passam sem alteração. Valores None omitem o par inteiro (diferente de
False, que vira "0").
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from urllib.parse import quote_plus

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
_LEADING_INT = re.compile(r"\s*[+-]?\d+")

QueryParameters = Mapping[str, object]


@dataclass(frozen=True, slots=True)
class ParamRule:
    """Regra de tradução de um parâmetro lógico.

    Attributes:
        name: Nome do parâmetro no wire
        transform: Conversão do valor antes da codificação
        follow: Pares extras emitidos logo após este, calculados sobre
            o mapping completo
    """

    name: str
    transform: Callable[[object], object] | None = None
    follow: Callable[[QueryParameters], tuple[tuple[str, object], ...]] | None = None


def format_timestamp(value: object) -> object:
    """Formata datas como YYYY-MM-DDTHH:MM:SS; aware vira UTC com sufixo Z."""
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value.astimezone(UTC).strftime(TIMESTAMP_FORMAT) + "Z"
        return value.strftime(TIMESTAMP_FORMAT)
    if isinstance(value, date):
        return value.strftime(TIMESTAMP_FORMAT)
    return value


def _encode_value(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, date):
        return str(format_timestamp(value))
    return str(value)


def _leading_int(value: object) -> int:
    """Inteiro no início do valor (ex: "12abc" -> 12); texto sem dígitos vira 0."""
    if isinstance(value, int | float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group()) if match else 0


def _start_index(offset: object) -> object:
    return _leading_int(offset) + 1


def _sort_order(descending: object) -> object:
    return "descending" if descending else "ascending"


def _default_sort_order(params: QueryParameters) -> tuple[tuple[str, object], ...]:
    # order sem descending explícito ordena de forma decrescente
    if params.get("descending") is None:
        return (("sortorder", "descending"),)
    return ()


GOOGLE_CONTACTS_RULES: Mapping[str, ParamRule] = {
    "limit": ParamRule("max-results"),
    "offset": ParamRule("start-index", transform=_start_index),
    "order": ParamRule("orderby", follow=_default_sort_order),
    "descending": ParamRule("sortorder", transform=_sort_order),
    "updated_after": ParamRule("updated-min", transform=format_timestamp),
}


def translate_params(
    params: QueryParameters,
    rules: Mapping[str, ParamRule] | None = None,
) -> list[tuple[str, object]]:
    """Aplica a tabela de regras e devolve os pares de wire em ordem."""
    table = rules or {}
    pairs: list[tuple[str, object]] = []
    for key, value in params.items():
        if value is None:
            continue
        rule = table.get(key)
        if rule is None:
            pairs.append((key, value))
            continue
        pairs.append((rule.name, rule.transform(value) if rule.transform else value))
        if rule.follow is not None:
            pairs.extend(rule.follow(params))
    return pairs


def build_query(
    params: QueryParameters,
    rules: Mapping[str, ParamRule] | None = None,
) -> str:
    """Serializa parâmetros lógicos em query string.

    Args:
        params: Mapping nome lógico -> valor (ordem de inserção preservada)
        rules: Tabela de tradução do provider (None = passthrough)

    Returns:
        Query string sem o `?` inicial (pares escapados com regras de form)

    Example:
        >>> build_query({"offset": 10}, GOOGLE_CONTACTS_RULES)
        'start-index=11'
    """
    return "&".join(
        f"{quote_plus(str(key))}={quote_plus(_encode_value(value))}"
        for key, value in translate_params(params, rules)
    )
