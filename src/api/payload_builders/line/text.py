"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import TextReply


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, reply: TextReply) -> dict[str, Any]:
        """Constrói objeto de mensagem de texto conforme Messaging API."""
        return {
            "type": "text",
            "text": reply.text,
        }
