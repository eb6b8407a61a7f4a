"""Entrypoint da aplicação line-preset-bot.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m app.app

Cloud Run:
    O container deve expor a porta definida em PORT (padrão 8080).
"""

from __future__ import annotations

import os
import platform
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.health.router import SERVICE_VERSION
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_event_router
from config.logging import get_logger
from config.settings import get_base_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido)
    - Monta o roteador de eventos com clientes LINE e GCS
    """
    settings = get_base_settings()
    logger.info(
        "app_starting",
        extra={
            "service": settings.service_name,
            "version": SERVICE_VERSION,
            "pid": os.getpid(),
            "arch": platform.machine(),
            "environment": settings.environment,
        },
    )
    validate_runtime_settings()
    app.state.event_router = create_event_router()

    yield

    logger.info("app_shutting_down", extra={"service": settings.service_name})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="line-preset-bot",
        description="Bot LINE de imagens por preset com vínculo via upload de admin",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    try:
        validate_runtime_settings()
    except ConfigurationError as exc:
        logger.error("app_start_aborted", extra={"error": str(exc)})
        sys.exit(1)

    settings = get_base_settings()
    logger.info("Starting line-preset-bot", extra={"port": settings.port})
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
