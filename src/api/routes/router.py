"""Agregador de rotas: registra os routers de health e do LINE.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.line.router import router as line_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks na raiz (/ e /health)
    api_router.include_router(health_router, tags=["health"])

    # LINE (POST /webhook)
    api_router.include_router(line_router, tags=["line"])

    return api_router
