"""Webhook LINE: assinatura e parsing seguro."""

from ..signature import SignatureResult, check_line_signature, verify_line_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "check_line_signature",
    "parse_webhook_request",
    "verify_line_signature",
]
