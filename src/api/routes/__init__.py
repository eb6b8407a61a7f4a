"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook e health)
- Validação inicial de request (assinatura, JSON)
- Delegação para coordinators
- Respostas HTTP apropriadas

Estrutura:
- routes/line/: webhook do LINE
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
