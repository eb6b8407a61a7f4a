"""Protocolo do cliente da Messaging API do LINE.

Evita dependência direta do app na camada api.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import MessageContent, OutboundReply, ReplyResult


class LineMessagingProtocol(Protocol):
    """Contrato mínimo: responder eventos e baixar conteúdo de mensagens."""

    async def reply(
        self,
        reply_token: str,
        messages: Sequence[OutboundReply],
    ) -> ReplyResult:
        """Envia as mensagens numa única chamada de reply. Nunca levanta."""
        ...

    async def fetch_content(self, message_id: str) -> MessageContent:
        """Baixa bytes da mídia.

        Raises:
            ContentFetchError: Status não-2xx ou erro de transporte.
        """
        ...
