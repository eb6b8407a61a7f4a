"""Validação de assinatura HMAC-SHA256 do webhook LINE.

O LINE assina o corpo bruto com o channel secret e envia o digest em
Base64 no header `x-line-signature`.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-line-signature"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da checagem de assinatura."""

    valid: bool
    error: str | None = None


def compute_line_signature(secret: str, raw_body: bytes) -> bytes:
    """Digest HMAC-SHA256 do corpo usando o channel secret como chave."""
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).digest()


def verify_line_signature(
    secret: str,
    raw_body: bytes,
    signature_header: str | bytes | None,
) -> bool:
    """Valida o header de assinatura contra o corpo bruto.

    Falha fechada: header ausente, não-UTF-8 ou Base64 inválido retorna False.
    A comparação é em tempo constante.

    Args:
        secret: Channel secret
        raw_body: Corpo exato recebido
        signature_header: Valor de x-line-signature

    Returns:
        True se a assinatura confere
    """
    if not signature_header:
        return False

    if isinstance(signature_header, bytes):
        try:
            signature_header = signature_header.decode("utf-8")
        except UnicodeDecodeError:
            return False

    try:
        decoded = base64.b64decode(signature_header.strip(), validate=True)
    except (binascii.Error, ValueError):
        return False

    return hmac.compare_digest(compute_line_signature(secret, raw_body), decoded)


def check_line_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Lê o header (case-insensitive) e valida a assinatura.

    Sem secret configurado a requisição é sempre rejeitada.
    """
    if not secret:
        return SignatureResult(valid=False, error="missing_channel_secret")

    signature = _get_header(headers, SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    if not verify_line_signature(secret, raw_body, signature):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None
