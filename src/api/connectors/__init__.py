"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- line/: Messaging API do LINE
"""

__all__: list[str] = []
