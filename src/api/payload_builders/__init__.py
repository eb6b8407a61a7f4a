"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- line/: Messaging API do LINE
"""

__all__: list[str] = []
