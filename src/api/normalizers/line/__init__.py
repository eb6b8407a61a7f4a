"""Normalizer LINE: decodifica eventos do webhook em InboundEvent.

Variantes: MessageEvent (text, image, não suportada), PostbackEvent e
IgnoredEvent para o que não é acionável.
"""

from .extractor import extract_event, extract_events, extract_message, extract_source

__all__ = [
    "extract_event",
    "extract_events",
    "extract_message",
    "extract_source",
]
