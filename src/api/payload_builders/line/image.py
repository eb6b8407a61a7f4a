"""Builder para mensagens de imagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import ImageReply


class ImagePayloadBuilder:
    """Builder para imagem; a mesma URL serve de original e de preview."""

    def build(self, reply: ImageReply) -> dict[str, Any]:
        return {
            "type": "image",
            "originalContentUrl": reply.url,
            "previewImageUrl": reply.url,
        }
