"""Registro de métricas via structured logging.

As métricas são linhas de log com `metric_type`, agregáveis depois
por log-based metrics do Cloud Logging.

Métricas suportadas:
- Latência: tempo de processamento por componente/operação
- Desfecho de evento: contador por tipo de evento e resultado

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("webhook", "dispatch", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "webhook")
        operation: Nome da operação (ex: "dispatch")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_event_outcome(
    event_kind: str,
    outcome: str,
    correlation_id: str | None = None,
) -> None:
    """Registra desfecho do processamento de um evento.

    Args:
        event_kind: Tipo do evento (ex: "message.text", "postback")
        outcome: Resultado ("processed", "ignored", "failed")
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_event_outcome",
        extra={
            "metric_type": "event_outcome",
            "event_kind": event_kind,
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )
