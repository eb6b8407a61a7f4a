"""Extrator de eventos do webhook LINE.

Responsabilidades:
- Converter cada entrada de `events` em um variante de InboundEvent
- Marcar explicitamente eventos não acionáveis como IgnoredEvent

Não faz regra de negócio (admin, presets) - apenas extração estrutural.
"""

from __future__ import annotations

import logging
from typing import Any

from app.constants.line import EventType, MessageType
from app.protocols.models import (
    EventSource,
    IgnoredEvent,
    ImageMessage,
    InboundEvent,
    InboundMessage,
    MessageEvent,
    PostbackEvent,
    TextMessage,
    UnsupportedMessage,
)

logger = logging.getLogger(__name__)


def extract_events(payload: dict[str, Any]) -> list[InboundEvent]:
    """Extrai eventos tipados na ordem em que chegaram."""
    raw_events = payload.get("events") or []
    return [extract_event(raw) for raw in raw_events]


def extract_event(raw: Any) -> InboundEvent:
    """Converte um evento bruto em variante tipada."""
    if not isinstance(raw, dict):
        return IgnoredEvent(event_type="", reason="event_not_object")

    event_type = _as_str(raw.get("type")) or ""
    if event_type not in (EventType.MESSAGE, EventType.POSTBACK):
        logger.debug("line_event_type_ignored", extra={"event_type": event_type})
        return IgnoredEvent(event_type=event_type, reason="unsupported_event_type")

    reply_token = _as_str(raw.get("replyToken"))
    if not reply_token:
        return IgnoredEvent(event_type=event_type, reason="missing_reply_token")

    source = extract_source(raw.get("source"))

    if event_type == EventType.MESSAGE:
        message = extract_message(raw.get("message"))
        if message is None:
            return IgnoredEvent(event_type=event_type, reason="missing_message")
        return MessageEvent(reply_token=reply_token, source=source, message=message)

    postback = raw.get("postback")
    data = _as_str(postback.get("data")) if isinstance(postback, dict) else None
    return PostbackEvent(reply_token=reply_token, source=source, data=data or "")


def extract_source(raw: Any) -> EventSource:
    """Extrai a origem; campos ausentes ficam None."""
    if not isinstance(raw, dict):
        return EventSource()
    return EventSource(
        type=_as_str(raw.get("type")),
        user_id=_as_str(raw.get("userId")),
        group_id=_as_str(raw.get("groupId")),
        room_id=_as_str(raw.get("roomId")),
    )


def extract_message(raw: Any) -> InboundMessage | None:
    """Extrai o corpo da mensagem; None se ausente ou malformado."""
    if not isinstance(raw, dict):
        return None

    message_id = _as_str(raw.get("id")) or ""
    message_type = _as_str(raw.get("type")) or ""

    if message_type == MessageType.TEXT:
        text = _as_str(raw.get("text"))
        if text is None:
            return None
        return TextMessage(id=message_id, text=text)

    if message_type == MessageType.IMAGE:
        if not message_id:
            return None
        return ImageMessage(id=message_id)

    return UnsupportedMessage(id=message_id, type=message_type)


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None
