"""Conector LINE - adapter de borda para a Messaging API.

Único ponto de IO com o LINE:
- Webhook (assinatura e parsing)
- Cliente HTTP para reply e download de conteúdo
- Erros da API
"""

from .http_client import LineMessagingClient, create_line_messaging_client
from .line_errors import LineApiError, parse_line_error
from .signature import SignatureResult, check_line_signature, verify_line_signature

__all__ = [
    "LineApiError",
    "LineMessagingClient",
    "SignatureResult",
    "check_line_signature",
    "create_line_messaging_client",
    "parse_line_error",
    "verify_line_signature",
]
