"""Builders de payload para a Messaging API do LINE."""

from api.payload_builders.line.factory import (
    MAX_MESSAGES_PER_REPLY,
    build_message_payload,
    build_reply_body,
)

__all__ = [
    "MAX_MESSAGES_PER_REPLY",
    "build_message_payload",
    "build_reply_body",
]
