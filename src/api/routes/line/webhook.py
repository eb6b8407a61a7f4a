"""Endpoint de webhook do LINE.

Endpoint:
- POST /webhook: recebimento de eventos (mensagens e postbacks)

Fluxo:
1. Valida `x-line-signature` sobre o corpo bruto (HMAC-SHA256, Base64)
2. Parseia JSON e decodifica eventos
3. Processa os eventos em ordem, antes de responder

Segurança:
- Assinatura inválida ou ausente: 401, sem nenhuma chamada externa
- JSON inválido após assinatura válida: 400
- Falhas de eventos individuais não alteram o 200
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.line.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from app.coordinators.line.inbound import process_inbound_payload
from app.observability import (
    get_correlation_id,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_line_settings

if TYPE_CHECKING:
    from app.coordinators.line.inbound import LineEventRouter

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_event_router(request: Request) -> LineEventRouter:
    """Obtém o roteador montado no startup (lazy se ausente)."""
    event_router = getattr(request.app.state, "event_router", None)
    if event_router is None:
        from app.bootstrap.dependencies import create_event_router

        event_router = create_event_router()
        request.app.state.event_router = event_router
    return event_router


@router.post("/webhook", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebimento de eventos do LINE.

    Validações:
    1. Assinatura HMAC (x-line-signature)
    2. JSON válido com `events` em lista

    Returns:
        Contagem de desfechos ou Response de erro.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    started_at = time.perf_counter()

    try:
        settings = get_line_settings()
        raw_body = await request.body()

        try:
            payload, _signature = parse_webhook_request(
                raw_body=raw_body,
                headers=request.headers,
                secret=settings.channel_secret or None,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"channel": "line", "error": str(exc)},
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"channel": "line", "error": str(exc)},
            )
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "line",
                "payload_size": len(raw_body),
                "event_count": len(payload["events"]),
            },
        )

        summary = await process_inbound_payload(payload, _get_event_router(request))
        record_latency(
            "webhook",
            "dispatch",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )

        return {
            "status": "received",
            "correlation_id": get_correlation_id(),
            "processed": summary.processed,
            "ignored": summary.ignored,
            "failed": summary.failed,
        }

    finally:
        reset_correlation_id(token)
