"""Agregador de settings do line-preset-bot.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    GCS_PUBLIC_BASE_URL,
    GCSSettings,
    StorageBackend,
    get_gcs_settings,
)

# Channel-specific settings
from config.settings.line import (
    DEFAULT_PRESETS,
    LINE_API_BASE_URL,
    LINE_API_DATA_BASE_URL,
    LineSettings,
    get_line_settings,
)

__all__ = [
    # Constants
    "DEFAULT_PRESETS",
    "GCS_PUBLIC_BASE_URL",
    "LINE_API_BASE_URL",
    "LINE_API_DATA_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "GCSSettings",
    # Channels
    "LineSettings",
    "StorageBackend",
    "get_base_settings",
    "get_gcs_settings",
    "get_line_settings",
]
