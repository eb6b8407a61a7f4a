"""Resposta determinística para textos: preset conhecido ou eco."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import ImageReply, TextReply
from config.logging import log_fallback

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.presets import PresetRegistry

logger = logging.getLogger(__name__)


def resolve_text_reply(
    text: str,
    registry: PresetRegistry,
    url_for: Callable[[str], str],
    echo_prefix: str = "",
) -> ImageReply | TextReply:
    """Escolhe a resposta para uma mensagem de texto.

    Texto aparado igual a uma chave do registro -> imagem na URL pública
    do caminho mapeado. Qualquer outro texto -> eco do texto aparado,
    com prefixo opcional.

    Args:
        text: Texto recebido
        registry: Presets configurados
        url_for: Converte caminho do objeto em URL pública
        echo_prefix: Prefixo do eco ("" = eco puro)
    """
    trimmed = text.strip()
    object_path = registry.get(trimmed)
    if object_path is not None:
        return ImageReply(url=url_for(object_path))

    log_fallback(logger, "preset_lookup", reason="no_preset_match")
    return TextReply(text=f"{echo_prefix}{trimmed}")
