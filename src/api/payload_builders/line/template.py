"""Builder para template `buttons` com ações de postback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import ButtonsReply


class ButtonsTemplatePayloadBuilder:
    """Builder para mensagens de template do tipo buttons."""

    def build(self, reply: ButtonsReply) -> dict[str, Any]:
        """Constrói payload de template.

        Args:
            reply: Texto, alt text e ações de postback

        Returns:
            Objeto `template` conforme Messaging API
        """
        actions = [
            {
                "type": "postback",
                "label": action.label,
                "data": action.data,
            }
            for action in reply.actions
        ]
        return {
            "type": "template",
            "altText": reply.alt_text,
            "template": {
                "type": "buttons",
                "text": reply.text,
                "actions": actions,
            },
        }
