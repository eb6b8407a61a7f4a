"""Settings específicas do LINE.

Credenciais do canal, endpoints da Messaging API e parâmetros do bot
(administradores, presets e formato do eco).
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Messaging API
LINE_API_BASE_URL: str = "https://api.line.me"
LINE_API_DATA_BASE_URL: str = "https://api-data.line.me"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0

# Presets padrão: texto fixo -> caminho do objeto no bucket
DEFAULT_PRESETS: tuple[tuple[str, str], ...] = (
    ("menu1", "images/menu1.jpg"),
    ("menu2", "images/menu2.jpg"),
    ("menu3", "images/menu3.jpg"),
    ("menu4", "images/menu4.jpg"),
)


@dataclass(frozen=True)
class LineSettings:
    """Configurações do canal LINE.

    Attributes:
        channel_secret: Secret do canal para validação HMAC do webhook
        channel_access_token: Bearer token da Messaging API
        api_base_url: Host da API de mensagens (reply)
        api_data_base_url: Host da API de conteúdo (download de mídia)
        request_timeout_seconds: Timeout das chamadas HTTP
        invalid_timeout_value: Valor bruto de LINE_REQUEST_TIMEOUT_SECONDS que
            não pôde ser lido ("" quando válido ou ausente)
        admin_user_ids: IDs de usuário autorizados a enviar imagens
        presets: Pares (chave, caminho) na ordem configurada
        invalid_preset_entries: Entradas de LINE_PRESETS que não puderam ser lidas
        echo_prefix: Prefixo aplicado ao eco de textos desconhecidos
    """

    channel_secret: str = ""
    channel_access_token: str = ""

    api_base_url: str = LINE_API_BASE_URL
    api_data_base_url: str = LINE_API_DATA_BASE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    invalid_timeout_value: str = ""

    admin_user_ids: tuple[str, ...] = ()
    presets: tuple[tuple[str, str], ...] = DEFAULT_PRESETS
    invalid_preset_entries: tuple[str, ...] = ()
    echo_prefix: str = ""

    @property
    def reply_endpoint(self) -> str:
        """URL do endpoint de reply."""
        return f"{self.api_base_url}/v2/bot/message/reply"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do LINE.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_secret:
            errors.append("LINE_CHANNEL_SECRET não configurado")

        if not self.channel_access_token:
            errors.append("LINE_CHANNEL_ACCESS_TOKEN não configurado")

        if self.invalid_timeout_value:
            errors.append(
                "LINE_REQUEST_TIMEOUT_SECONDS inválido: "
                f"{self.invalid_timeout_value!r} (esperado número > 0)"
            )
        elif self.request_timeout_seconds <= 0:
            errors.append("LINE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.presets:
            errors.append("LINE_PRESETS não pode ser vazio")

        keys = [key for key, _ in self.presets]
        duplicated = sorted({key for key in keys if keys.count(key) > 1})
        if duplicated:
            errors.append(f"LINE_PRESETS com chaves duplicadas: {', '.join(duplicated)}")

        errors.extend(
            f"LINE_PRESETS entrada inválida: {entry!r}" for entry in self.invalid_preset_entries
        )

        return errors


def parse_admin_user_ids(raw: str) -> tuple[str, ...]:
    """Lê lista separada por vírgula, descartando entradas vazias."""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def parse_presets(raw: str) -> tuple[tuple[tuple[str, str], ...], tuple[str, ...]]:
    """Lê 'chave=caminho,chave=caminho' preservando a ordem.

    Returns:
        (pares válidos, entradas inválidas)
    """
    pairs: list[tuple[str, str]] = []
    invalid: list[str] = []
    for entry in raw.split(","):
        if not entry.strip():
            continue
        key, sep, path = entry.partition("=")
        key, path = key.strip(), path.strip().lstrip("/")
        if not sep or not key or not path:
            invalid.append(entry.strip())
            continue
        pairs.append((key, path))
    return tuple(pairs), tuple(invalid)


def parse_timeout(raw: str | None) -> tuple[float, str]:
    """Lê o timeout em segundos.

    Returns:
        (valor, entrada inválida); valor ausente usa o padrão e valor
        ilegível volta como entrada inválida para `validate()` reportar.
    """
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT_SECONDS, ""
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS, raw
    if not math.isfinite(value):
        return DEFAULT_REQUEST_TIMEOUT_SECONDS, raw
    return value, ""


def _admin_ids_from_env() -> tuple[str, ...]:
    """LINE_ADMIN_USER_IDS; sem ela, o nome legado ADMIN_USER_IDS."""
    raw = os.getenv("LINE_ADMIN_USER_IDS")
    if raw is None:
        raw = os.getenv("ADMIN_USER_IDS", "")
    return parse_admin_user_ids(raw)


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    raw_presets = os.getenv("LINE_PRESETS", "")
    presets, invalid_presets = parse_presets(raw_presets) if raw_presets.strip() else (
        DEFAULT_PRESETS,
        (),
    )
    timeout, invalid_timeout = parse_timeout(os.getenv("LINE_REQUEST_TIMEOUT_SECONDS"))
    return LineSettings(
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL).rstrip("/"),
        api_data_base_url=os.getenv("LINE_API_DATA_BASE_URL", LINE_API_DATA_BASE_URL).rstrip("/"),
        request_timeout_seconds=timeout,
        invalid_timeout_value=invalid_timeout,
        admin_user_ids=_admin_ids_from_env(),
        presets=presets,
        invalid_preset_entries=invalid_presets,
        echo_prefix=os.getenv("LINE_ECHO_PREFIX", ""),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
