"""Use case de vínculo de imagem a preset (upload do admin + promoção).

Estados por upload:
    none --(imagem de admin, upload temporário)--> pending
    pending --(postback com target conhecido, cópia)--> done

Não há expiração nem uso único: o mesmo pending_id pode ser promovido
de novo, para o mesmo ou outro preset, enquanto o objeto temporário existir.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from app.constants.line import TEMP_UPLOAD_CONTENT_TYPE
from app.constants.line_replies import (
    ACCESS_DENIED_TEXT,
    BINDING_PROMPT_TEXT,
    BINDING_UPDATED_TEXT,
    TARGET_NOT_FOUND_TEXT,
)
from app.domain.binding import (
    PendingBinding,
    encode_postback_data,
    parse_postback_data,
    temp_object_path,
)
from app.protocols.models import ButtonsReply, ImageReply, PostbackAction, TextReply

if TYPE_CHECKING:
    from app.domain.admins import AdminSet
    from app.domain.presets import PresetRegistry
    from app.protocols.messaging_client import LineMessagingProtocol
    from app.protocols.models import ImageMessage, MessageEvent, PostbackEvent
    from app.protocols.storage import ObjectStorageProtocol

logger = logging.getLogger(__name__)

UploadOutcome = Literal["denied", "pending"]
PromotionOutcome = Literal["ignored", "target_not_found", "promoted"]


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Desfecho do upload de imagem."""

    outcome: UploadOutcome
    pending: PendingBinding | None = None


@dataclass(frozen=True, slots=True)
class PromotionResult:
    """Desfecho do postback de promoção."""

    outcome: PromotionOutcome
    target_path: str | None = None


class BindPresetImageUseCase:
    """Orquestra upload temporário, prompt de escolha e promoção.

    Falhas de download (ContentFetchError) e de storage (StorageError)
    propagam para o roteador, que registra e segue; nesses caminhos
    nenhuma resposta é enviada ao usuário.
    """

    def __init__(
        self,
        messaging: LineMessagingProtocol,
        storage: ObjectStorageProtocol,
        bucket: str,
        registry: PresetRegistry,
        admins: AdminSet,
        upload_prefix: str = "uploads",
    ) -> None:
        self._messaging = messaging
        self._storage = storage
        self._bucket = bucket
        self._registry = registry
        self._admins = admins
        self._upload_prefix = upload_prefix

    async def handle_upload(self, event: MessageEvent, message: ImageMessage) -> UploadResult:
        """Recebe imagem de admin, grava temporário e pergunta o destino."""
        user_id = event.source.user_id
        if not self._admins.is_admin(user_id):
            logger.info("image_upload_denied", extra={"source_type": event.source.type})
            await self._messaging.reply(event.reply_token, [TextReply(text=ACCESS_DENIED_TEXT)])
            return UploadResult(outcome="denied")

        content = await self._messaging.fetch_content(message.id)

        pending = PendingBinding.create(self._upload_prefix)
        content_type = _image_content_type(content.content_type)
        # Upload antes do prompt: todo pending_id enviado já existe no bucket
        await self._storage.upload(self._bucket, pending.temp_path, content.data, content_type)
        logger.info(
            "binding_pending_created",
            extra={"pending_id": pending.pending_id, "temp_path": pending.temp_path},
        )

        await self._messaging.reply(event.reply_token, [self.build_prompt(pending.pending_id)])
        return UploadResult(outcome="pending", pending=pending)

    def build_prompt(self, pending_id: str) -> ButtonsReply:
        """Template com uma ação por preset, na ordem do registro."""
        actions = tuple(
            PostbackAction(label=key, data=encode_postback_data(pending_id, key))
            for key in self._registry
        )
        return ButtonsReply(alt_text=BINDING_PROMPT_TEXT, text=BINDING_PROMPT_TEXT, actions=actions)

    async def handle_postback(self, event: PostbackEvent) -> PromotionResult:
        """Promove o objeto temporário para o caminho do preset escolhido."""
        request = parse_postback_data(event.data)
        if request is None:
            logger.info("postback_ignored", extra={"reason": "missing_binding_fields"})
            return PromotionResult(outcome="ignored")

        target_path = self._registry.get(request.target_key)
        if target_path is None:
            logger.info("binding_target_not_found", extra={"target_key": request.target_key})
            await self._messaging.reply(event.reply_token, [TextReply(text=TARGET_NOT_FOUND_TEXT)])
            return PromotionResult(outcome="target_not_found")

        if not request.has_valid_pending_id:
            logger.info("postback_ignored", extra={"reason": "invalid_pending_id"})
            return PromotionResult(outcome="ignored")

        temp_path = temp_object_path(self._upload_prefix, request.pending_id)
        await self._storage.copy(self._bucket, temp_path, target_path)
        logger.info(
            "binding_promoted",
            extra={
                "pending_id": request.pending_id,
                "target_key": request.target_key,
                "target_path": target_path,
            },
        )

        url = self._storage.public_url(self._bucket, target_path)
        await self._messaging.reply(
            event.reply_token,
            [TextReply(text=BINDING_UPDATED_TEXT.format(key=request.target_key))],
        )
        await self._messaging.reply(event.reply_token, [ImageReply(url=url)])
        return PromotionResult(outcome="promoted", target_path=target_path)


def _image_content_type(content_type: str | None) -> str:
    """Usa o tipo informado pelo LINE se for imagem; senão image/jpeg."""
    if content_type:
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type.startswith("image/"):
            return media_type
    return TEMP_UPLOAD_CONTENT_TYPE
