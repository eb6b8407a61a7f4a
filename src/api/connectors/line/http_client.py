"""Cliente HTTP especializado para a Messaging API do LINE.

Estende HttpClient genérico com:
- Autenticação Bearer com o channel access token
- Reply (texto, imagem, template buttons) em uma chamada por invocação
- Download de conteúdo de mensagens (api-data)
- Logging estruturado sem tokens

Falhas de reply são observadas e registradas, nunca propagadas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.line.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.line.line_errors import parse_line_error
from api.connectors.line.line_logging import log_line_error, log_success
from api.payload_builders.line import build_reply_body
from app.protocols.models import (
    ButtonsReply,
    ImageReply,
    MessageContent,
    PostbackAction,
    ReplyResult,
    TextReply,
)
from utils.errors import ContentFetchError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import OutboundReply
    from config.settings import LineSettings

logger: logging.Logger = logging.getLogger(__name__)


class LineMessagingClient(HttpClient):
    """Cliente da Messaging API do LINE.

    Args:
        access_token: Channel access token (Bearer)
        reply_endpoint: URL completa de /v2/bot/message/reply
        content_base_url: Host de api-data (download de mídia)
        config: Configuração HTTP base
    """

    def __init__(
        self,
        access_token: str,
        reply_endpoint: str,
        content_base_url: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        if not access_token or not access_token.strip():
            raise ValueError(
                "access_token é obrigatório. "
                "Verifique se LINE_CHANNEL_ACCESS_TOKEN está configurado."
            )
        super().__init__(config)
        self._access_token = access_token
        self._reply_endpoint = reply_endpoint
        self._content_base_url = content_base_url.rstrip("/")

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._access_token}"}

    async def reply(
        self,
        reply_token: str,
        messages: Sequence[OutboundReply],
    ) -> ReplyResult:
        """Envia mensagens de reply numa única chamada.

        Returns:
            ReplyResult; status não-2xx e erros de transporte viram
            success=False com log, sem exceção.
        """
        try:
            body = build_reply_body(reply_token, messages)
        except ValueError as exc:
            logger.error("line_reply_invalid", extra={"error": str(exc)})
            return ReplyResult(success=False, error="invalid_reply")

        try:
            response = await self.post(
                self._reply_endpoint,
                json=body,
                headers=self._auth_headers(),
            )
        except HttpError as exc:
            logger.error(
                "line_reply_failed",
                extra={"endpoint": self._reply_endpoint, "error": str(exc)},
            )
            return ReplyResult(success=False, error=str(exc))

        line_error = parse_line_error(response)
        if line_error is not None:
            log_line_error(line_error, "POST", self._reply_endpoint, "line_reply")
            return ReplyResult(
                success=False,
                status_code=response.status_code,
                error=line_error.message,
            )

        log_success("POST", self._reply_endpoint, response.status_code, "line_reply")
        return ReplyResult(success=True, status_code=response.status_code)

    async def reply_text(self, reply_token: str, text: str) -> ReplyResult:
        """Responde com uma mensagem de texto."""
        return await self.reply(reply_token, [TextReply(text=text)])

    async def reply_image(self, reply_token: str, url: str) -> ReplyResult:
        """Responde com uma imagem (original e preview iguais)."""
        return await self.reply(reply_token, [ImageReply(url=url)])

    async def reply_buttons(
        self,
        reply_token: str,
        alt_text: str,
        text: str,
        actions: Sequence[PostbackAction],
    ) -> ReplyResult:
        """Responde com template buttons."""
        return await self.reply(
            reply_token,
            [ButtonsReply(alt_text=alt_text, text=text, actions=tuple(actions))],
        )

    def content_endpoint(self, message_id: str) -> str:
        """URL de download do conteúdo de uma mensagem."""
        if not message_id:
            raise ValueError("message_id é obrigatório")
        return f"{self._content_base_url}/v2/bot/message/{message_id}/content"

    async def fetch_content(self, message_id: str) -> MessageContent:
        """Baixa os bytes de uma mensagem de mídia.

        Raises:
            ContentFetchError: Status não-2xx ou falha de transporte
        """
        endpoint = self.content_endpoint(message_id)
        try:
            response = await self.get(endpoint, headers=self._auth_headers())
        except HttpError as exc:
            raise ContentFetchError(f"falha ao baixar conteúdo do LINE: {exc}") from exc

        line_error = parse_line_error(response)
        if line_error is not None:
            log_line_error(line_error, "GET", endpoint, "line_content_fetch")
            raise ContentFetchError(
                f"falha ao baixar conteúdo do LINE: status={response.status_code}",
                status_code=response.status_code,
            )

        content_type = response.headers.get("content-type")
        logger.info(
            "line_content_fetched",
            extra={"size_bytes": len(response.content), "content_type": content_type},
        )
        return MessageContent(data=response.content, content_type=content_type)


def create_line_messaging_client(
    settings: LineSettings | None = None,
    transport: object | None = None,
) -> LineMessagingClient:
    """Factory para criar cliente LINE com config padrão.

    Args:
        settings: LineSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes).

    Returns:
        Cliente configurado.
    """
    from config.settings import get_line_settings

    line = settings or get_line_settings()
    config = HttpClientConfig(
        timeout_seconds=line.request_timeout_seconds,
        transport=transport,  # type: ignore[arg-type]
    )
    return LineMessagingClient(
        access_token=line.channel_access_token,
        reply_endpoint=line.reply_endpoint,
        content_base_url=line.api_data_base_url,
        config=config,
    )
