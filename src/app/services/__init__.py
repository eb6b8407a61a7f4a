"""Serviços determinísticos do bot."""

from app.services.preset_replies import resolve_text_reply

__all__ = ["resolve_text_reply"]
