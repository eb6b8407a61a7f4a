"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- line/: eventos do webhook da Messaging API do LINE
"""

from .line import extract_events

__all__ = [
    "extract_events",
]
