"""Modelos do vínculo de imagem pendente a um preset.

Fluxo: upload do admin -> objeto temporário `uploads/<id>.jpg` ->
postback `pending=<id>&target=<chave>` -> cópia para o caminho do preset.
"""

from __future__ import annotations

import uuid
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, ConfigDict, Field

from app.constants.line import PostbackField


class PendingBinding(BaseModel):
    """Upload temporário aguardando escolha do preset."""

    model_config = ConfigDict(frozen=True)

    pending_id: str = Field(..., min_length=1, description="Identificador aleatório do upload.")
    temp_path: str = Field(..., min_length=1, description="Caminho do objeto temporário.")

    @classmethod
    def create(cls, upload_prefix: str) -> PendingBinding:
        """Gera um novo id (UUID v4) e o caminho temporário derivado."""
        pending_id = str(uuid.uuid4())
        return cls(pending_id=pending_id, temp_path=temp_object_path(upload_prefix, pending_id))


class BindingRequest(BaseModel):
    """Pedido de promoção decodificado do callback data do postback.

    Os campos chegam como vieram no postback; vazios inclusive. A chave
    é conferida contra o registro antes do id pendente.
    """

    model_config = ConfigDict(frozen=True)

    pending_id: str
    target_key: str

    @property
    def has_valid_pending_id(self) -> bool:
        """O id vira parte do nome do objeto; não pode escapar do prefixo."""
        value = self.pending_id
        return bool(value.strip()) and "/" not in value and value not in (".", "..")


def temp_object_path(upload_prefix: str, pending_id: str) -> str:
    """Caminho determinístico do objeto temporário."""
    return f"{upload_prefix.strip('/')}/{pending_id}.jpg"


def encode_postback_data(pending_id: str, target_key: str) -> str:
    """Codifica o callback data como pares urlencoded."""
    return urlencode({PostbackField.PENDING: pending_id, PostbackField.TARGET: target_key})


def parse_postback_data(data: str) -> BindingRequest | None:
    """Decodifica callback data; None se faltar o campo `pending` ou `target`.

    Campo presente com valor vazio conta como presente.
    """
    params = parse_qs(data or "", keep_blank_values=True)
    pending = params.get(PostbackField.PENDING)
    target = params.get(PostbackField.TARGET)
    if pending is None or target is None:
        return None
    return BindingRequest(pending_id=pending[0], target_key=target[0])
