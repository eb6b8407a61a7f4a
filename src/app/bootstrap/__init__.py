"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.constants.line import MAX_ACTION_LABEL_LENGTH, MAX_BUTTON_ACTIONS
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_gcs_settings,
    get_line_settings,
)
from utils.errors import ConfigurationError

# Nome do serviço para logs
SERVICE_NAME = "line_preset_bot"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de todas as settings, prefixados pelo domínio."""
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in get_base_settings().validate())

    line = get_line_settings()
    errors.extend(f"line: {error}" for error in line.validate())
    errors.extend(f"line: {error}" for error in _preset_limit_errors(line.presets))

    errors.extend(f"gcs: {error}" for error in get_gcs_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Sem secret, token ou bucket o serviço não consegue operar; qualquer
    erro impede o boot em todos os ambientes.

    Raises:
        ConfigurationError: Se alguma setting for inválida.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if errors:
        logger.error(
            "settings_validation_failed",
            extra={
                "component": "bootstrap",
                "result": "failed",
                "environment": environment,
                "error_count": len(errors),
                "errors": errors,
            },
        )
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {environment}:\n{details}")

    if not get_line_settings().admin_user_ids:
        logger.warning(
            "admin_list_empty",
            extra={"component": "bootstrap", "detail": "uploads de imagem serão negados"},
        )

    logger.info(
        "settings_validated",
        extra={"component": "bootstrap", "result": "ok", "environment": environment},
    )


def _preset_limit_errors(presets: tuple[tuple[str, str], ...]) -> list[str]:
    """Limites do template buttons: as chaves viram rótulos de ação."""
    errors: list[str] = []
    if len(presets) > MAX_BUTTON_ACTIONS:
        errors.append(
            f"LINE_PRESETS aceita no máximo {MAX_BUTTON_ACTIONS} presets "
            f"(configurados: {len(presets)})"
        )
    errors.extend(
        f"LINE_PRESETS chave excede {MAX_ACTION_LABEL_LENGTH} caracteres: {key!r}"
        for key, _ in presets
        if len(key) > MAX_ACTION_LABEL_LENGTH
    )
    return errors
