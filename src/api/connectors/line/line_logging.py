"""Helpers de logging para a API do LINE (sem tokens)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .line_errors import LineApiError

logger = logging.getLogger(__name__)


def log_line_error(
    line_error: LineApiError,
    method: str,
    endpoint: str,
    operation: str,
) -> None:
    """Loga resposta não-2xx com status e corpo."""
    logger.error(
        f"{operation}_failed",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": line_error.status_code,
            "error_message": line_error.message,
            "error_details": list(line_error.details),
            "response_body": line_error.body,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
    operation: str,
) -> None:
    """Loga sucesso."""
    logger.info(
        f"{operation}_sent",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
