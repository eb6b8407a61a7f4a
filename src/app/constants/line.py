"""Enums de domínio para eventos e mensagens do LINE."""

from __future__ import annotations

from enum import StrEnum


class EventType(StrEnum):
    """Tipos de evento de webhook tratados pelo bot."""

    MESSAGE = "message"
    POSTBACK = "postback"


class MessageType(StrEnum):
    """Tipos de mensagem inbound tratados pelo bot."""

    TEXT = "text"
    IMAGE = "image"


class PostbackField(StrEnum):
    """Campos do callback data do prompt de vínculo."""

    PENDING = "pending"
    TARGET = "target"


# Limites do template "buttons" da Messaging API
MAX_BUTTON_ACTIONS = 4
MAX_ACTION_LABEL_LENGTH = 20

TEMP_UPLOAD_CONTENT_TYPE = "image/jpeg"
