"""Protocolos e contratos do core da aplicação."""

from .messaging_client import LineMessagingProtocol
from .models import (
    ButtonsReply,
    DispatchSummary,
    EventSource,
    IgnoredEvent,
    ImageMessage,
    ImageReply,
    InboundEvent,
    InboundMessage,
    MessageContent,
    MessageEvent,
    OutboundReply,
    PostbackAction,
    PostbackEvent,
    ReplyResult,
    TextMessage,
    TextReply,
    UnsupportedMessage,
)
from .storage import ObjectStorageProtocol

__all__ = [
    "ButtonsReply",
    "DispatchSummary",
    "EventSource",
    "IgnoredEvent",
    "ImageMessage",
    "ImageReply",
    "InboundEvent",
    "InboundMessage",
    "LineMessagingProtocol",
    "MessageContent",
    "MessageEvent",
    "ObjectStorageProtocol",
    "OutboundReply",
    "PostbackAction",
    "PostbackEvent",
    "ReplyResult",
    "TextMessage",
    "TextReply",
    "UnsupportedMessage",
]
