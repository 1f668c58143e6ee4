"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente pelo sistema de logs da aplicação hospedeira.

Métricas suportadas:
- Latência: tempo de cada fetch → decode → parse por provider
- Importação: contatos emitidos e entradas descartadas por feed

Uso:
    from app.observability.metrics import record_latency, record_import

    start = time.perf_counter()
    # ... operação ...
    record_latency("google", "fetch_contacts", (time.perf_counter() - start) * 1000)
    record_import("google", imported=42, skipped=3)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    provider: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de operação.

    Args:
        provider: Nome do provider (ex: "google", "yahoo")
        operation: Nome da operação (ex: "fetch_contacts", "session_token")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "provider": provider,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": get_correlation_id(),
        },
    )


def record_import(provider: str, *, imported: int, skipped: int) -> None:
    """Registra volume de uma importação.

    Args:
        provider: Nome do provider
        imported: Contatos emitidos pelo parser
        skipped: Entradas descartadas (sem email ou malformadas)
    """
    logger.info(
        "metric_contacts_imported",
        extra={
            "metric_type": "counter",
            "provider": provider,
            "imported": imported,
            "skipped": skipped,
            "correlation_id": get_correlation_id(),
        },
    )
