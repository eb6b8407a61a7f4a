"""Logging estruturado do line-preset-bot.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="line_preset_bot")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("line_reply_sent", extra={"status_code": 200})

Todo log carrega correlation_id e service. Tokens do canal, reply tokens
e textos de usuários nunca entram nos logs.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    SecretRedactionFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
