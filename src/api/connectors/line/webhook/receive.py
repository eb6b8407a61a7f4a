"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, check_line_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente ou inválida."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[dict[str, Any], SignatureResult]:
    """Valida assinatura e parseia JSON do webhook.

    A assinatura é checada antes de qualquer parsing do corpo.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Channel secret

    Raises:
        InvalidSignatureError: Se assinatura for ausente ou inválida
        InvalidJsonError: Se o JSON for inválido, não for objeto ou
            se `events` faltar ou não for lista

    Returns:
        (payload dict com `events`, SignatureResult)
    """
    signature_result = check_line_signature(raw_body, headers, secret)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    # A verificação do console envia `events: []`; o campo é obrigatório
    if "events" not in payload:
        raise InvalidJsonError("events_missing")
    if not isinstance(payload["events"], list):
        raise InvalidJsonError("events_not_list")

    return payload, signature_result
