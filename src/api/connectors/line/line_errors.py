"""Erros e helpers de parsing para a Messaging API do LINE."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

# Limite do corpo de erro registrado em log
MAX_LOGGED_BODY_CHARS = 1000


@dataclass(frozen=True)
class LineApiError:
    """Erro retornado pela API do LINE."""

    status_code: int
    message: str
    details: tuple[str, ...] = field(default_factory=tuple)
    body: str = ""


def parse_line_error(response: httpx.Response) -> LineApiError | None:
    """Extrai erro de uma resposta não-2xx.

    O LINE responde `{"message": ..., "details": [{"message", "property"}]}`;
    corpos fora desse formato são preservados como texto.

    Returns:
        LineApiError se status não-2xx, None se sucesso
    """
    if response.is_success:
        return None

    body = response.text[:MAX_LOGGED_BODY_CHARS]
    message = "Erro desconhecido"
    details: list[str] = []
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        message = str(data.get("message") or message)
        for item in data.get("details") or []:
            if isinstance(item, dict):
                prop = item.get("property")
                text = item.get("message", "")
                details.append(f"{prop}: {text}" if prop else str(text))

    return LineApiError(
        status_code=response.status_code,
        message=message,
        details=tuple(details),
        body=body,
    )
