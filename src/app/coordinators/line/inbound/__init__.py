"""Coordenação do processamento inbound do LINE."""

from app.coordinators.line.inbound.handler import LineEventRouter, process_inbound_payload

__all__ = ["LineEventRouter", "process_inbound_payload"]
