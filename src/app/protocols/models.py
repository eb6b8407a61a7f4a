"""Contratos canônicos de entrada e saída do bot.

Inbound: união fechada de eventos decodificados do webhook.
Outbound: mensagens de resposta independentes do formato JSON do LINE.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ──────────────────────────────────────────────────────────────────────────────
# Inbound
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class EventSource:
    """Origem do evento (usuário, grupo ou sala)."""

    type: str | None = None
    user_id: str | None = None
    group_id: str | None = None
    room_id: str | None = None


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Mensagem de texto."""

    id: str
    text: str


@dataclass(frozen=True, slots=True)
class ImageMessage:
    """Mensagem de imagem; o conteúdo é baixado pelo id."""

    id: str


@dataclass(frozen=True, slots=True)
class UnsupportedMessage:
    """Mensagem de tipo sem tratamento (vídeo, sticker, ...)."""

    id: str
    type: str


InboundMessage = TextMessage | ImageMessage | UnsupportedMessage


@dataclass(frozen=True, slots=True)
class MessageEvent:
    """Evento `message` com reply token e corpo presentes."""

    reply_token: str
    source: EventSource
    message: InboundMessage


@dataclass(frozen=True, slots=True)
class PostbackEvent:
    """Evento `postback` com o callback data bruto."""

    reply_token: str
    source: EventSource
    data: str


@dataclass(frozen=True, slots=True)
class IgnoredEvent:
    """Evento reconhecido como não acionável.

    Atributos:
        event_type: Valor bruto de `type` (pode ser vazio)
        reason: Motivo (unsupported_event_type, missing_reply_token, ...)
    """

    event_type: str
    reason: str


InboundEvent = MessageEvent | PostbackEvent | IgnoredEvent


# ──────────────────────────────────────────────────────────────────────────────
# Outbound
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TextReply:
    """Resposta de texto simples."""

    text: str


@dataclass(frozen=True, slots=True)
class ImageReply:
    """Resposta de imagem; original e preview usam a mesma URL."""

    url: str


@dataclass(frozen=True, slots=True)
class PostbackAction:
    """Botão que devolve `data` ao webhook como evento postback."""

    label: str
    data: str


@dataclass(frozen=True, slots=True)
class ButtonsReply:
    """Template `buttons` com N ações de postback."""

    alt_text: str
    text: str
    actions: tuple[PostbackAction, ...] = field(default_factory=tuple)


OutboundReply = TextReply | ImageReply | ButtonsReply


@dataclass(frozen=True, slots=True)
class ReplyResult:
    """Resultado observável de um envio de reply.

    Nunca vira exceção: falhas de reply são apenas registradas.
    """

    success: bool
    status_code: int | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class MessageContent:
    """Bytes de mídia baixados do LINE."""

    data: bytes
    content_type: str | None = None


@dataclass(frozen=True, slots=True)
class DispatchSummary:
    """Contagem de desfechos de uma entrega de webhook."""

    processed: int = 0
    ignored: int = 0
    failed: int = 0
