"""Factory para obter o builder correto por tipo de resposta."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from api.payload_builders.line.image import ImagePayloadBuilder
from api.payload_builders.line.template import ButtonsTemplatePayloadBuilder
from api.payload_builders.line.text import TextPayloadBuilder
from app.protocols.models import ButtonsReply, ImageReply, OutboundReply, TextReply

_BUILDERS: dict[type, Any] = {
    TextReply: TextPayloadBuilder(),
    ImageReply: ImagePayloadBuilder(),
    ButtonsReply: ButtonsTemplatePayloadBuilder(),
}

# Limite da Messaging API por chamada de reply
MAX_MESSAGES_PER_REPLY = 5


def build_message_payload(reply: OutboundReply) -> dict[str, Any]:
    """Converte uma resposta canônica no objeto de mensagem do LINE.

    Raises:
        ValueError: Se o tipo de resposta não for suportado
    """
    builder = _BUILDERS.get(type(reply))
    if builder is None:
        raise ValueError(f"Tipo de resposta não suportado: {type(reply).__name__}")
    return builder.build(reply)


def build_reply_body(reply_token: str, messages: Sequence[OutboundReply]) -> dict[str, Any]:
    """Monta o corpo completo de POST /v2/bot/message/reply.

    Raises:
        ValueError: Sem reply token, sem mensagens ou acima do limite
    """
    if not reply_token:
        raise ValueError("reply_token é obrigatório")
    if not messages:
        raise ValueError("ao menos uma mensagem é obrigatória")
    if len(messages) > MAX_MESSAGES_PER_REPLY:
        raise ValueError(f"máximo de {MAX_MESSAGES_PER_REPLY} mensagens por reply")

    return {
        "replyToken": reply_token,
        "messages": [build_message_payload(message) for message in messages],
    }
