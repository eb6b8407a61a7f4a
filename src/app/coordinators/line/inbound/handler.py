"""Roteamento de eventos inbound do LINE.

Cada evento de uma entrega é processado em ordem, um por vez. A falha
de um evento é registrada e não impede os seguintes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.line import extract_events
from app.observability import get_correlation_id, record_event_outcome
from app.protocols.models import (
    DispatchSummary,
    IgnoredEvent,
    ImageMessage,
    MessageEvent,
    PostbackEvent,
    TextMessage,
)
from app.services.preset_replies import resolve_text_reply
from utils.errors import UpstreamCallError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.presets import PresetRegistry
    from app.protocols.messaging_client import LineMessagingProtocol
    from app.protocols.models import InboundEvent
    from app.protocols.storage import ObjectStorageProtocol
    from app.use_cases.line.bind_preset_image import BindPresetImageUseCase

logger = logging.getLogger(__name__)


class LineEventRouter:
    """Despacha eventos para preset/eco, upload de admin ou promoção.

    | evento   | mensagem | ação                        |
    |----------|----------|-----------------------------|
    | message  | text     | preset ou eco               |
    | message  | image    | upload (somente admin)      |
    | postback | -        | promoção do vínculo         |
    | demais   | -        | ignorado, sem resposta      |
    """

    def __init__(
        self,
        messaging: LineMessagingProtocol,
        storage: ObjectStorageProtocol,
        bucket: str,
        registry: PresetRegistry,
        binding: BindPresetImageUseCase,
        echo_prefix: str = "",
    ) -> None:
        self._messaging = messaging
        self._storage = storage
        self._bucket = bucket
        self._registry = registry
        self._binding = binding
        self._echo_prefix = echo_prefix

    async def dispatch_all(self, events: Sequence[InboundEvent]) -> DispatchSummary:
        """Processa eventos em sequência; nunca levanta."""
        processed = ignored = failed = 0
        for index, event in enumerate(events):
            kind = _event_kind(event)
            try:
                handled = await self.dispatch(event)
            except Exception as exc:
                failed += 1
                _log_event_failure(exc, kind, index)
                record_event_outcome(kind, "failed", get_correlation_id())
                continue
            if handled:
                processed += 1
                record_event_outcome(kind, "processed", get_correlation_id())
            else:
                ignored += 1
                record_event_outcome(kind, "ignored", get_correlation_id())
        return DispatchSummary(processed=processed, ignored=ignored, failed=failed)

    async def dispatch(self, event: InboundEvent) -> bool:
        """Despacha um evento. Retorna False se ignorado."""
        if isinstance(event, IgnoredEvent):
            logger.debug(
                "line_event_ignored",
                extra={"event_type": event.event_type, "reason": event.reason},
            )
            return False

        if isinstance(event, PostbackEvent):
            result = await self._binding.handle_postback(event)
            return result.outcome != "ignored"

        if isinstance(event, MessageEvent):
            message = event.message
            if isinstance(message, TextMessage):
                await self._handle_text(event, message)
                return True
            if isinstance(message, ImageMessage):
                await self._binding.handle_upload(event, message)
                return True
            logger.debug("line_message_type_ignored", extra={"message_type": message.type})
            return False

        logger.warning("line_event_variant_unknown", extra={"variant": type(event).__name__})
        return False

    async def _handle_text(self, event: MessageEvent, message: TextMessage) -> None:
        reply = resolve_text_reply(
            message.text,
            self._registry,
            lambda path: self._storage.public_url(self._bucket, path),
            self._echo_prefix,
        )
        await self._messaging.reply(event.reply_token, [reply])


async def process_inbound_payload(
    payload: dict[str, Any],
    router: LineEventRouter,
) -> DispatchSummary:
    """Decodifica a entrega e despacha todos os eventos.

    Sem logs com PII: apenas contagens.
    """
    events = extract_events(payload)
    summary = await router.dispatch_all(events)

    logger.info(
        "inbound_processed",
        extra={
            "events": len(events),
            "processed": summary.processed,
            "ignored": summary.ignored,
            "failed": summary.failed,
        },
    )
    return summary


def _event_kind(event: InboundEvent) -> str:
    if isinstance(event, MessageEvent):
        message = event.message
        if isinstance(message, TextMessage):
            return "message.text"
        if isinstance(message, ImageMessage):
            return "message.image"
        return f"message.{message.type or 'unknown'}"
    if isinstance(event, PostbackEvent):
        return "postback"
    if isinstance(event, IgnoredEvent):
        return event.event_type or "unknown"
    return "unknown"


def _log_event_failure(exc: Exception, kind: str, index: int) -> None:
    if isinstance(exc, UpstreamCallError):
        logger.error(
            "line_event_upstream_failed",
            extra={
                "event_kind": kind,
                "event_index": index,
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
        )
        return
    logger.exception(
        "line_event_failed",
        extra={"event_kind": kind, "event_index": index, "error_type": type(exc).__name__},
    )
