"""Agregador de settings de infraestrutura GCP.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.gcs import (
    GCS_PUBLIC_BASE_URL,
    GCSSettings,
    StorageBackend,
    get_gcs_settings,
)

__all__ = [
    "GCS_PUBLIC_BASE_URL",
    "GCSSettings",
    "StorageBackend",
    "get_gcs_settings",
]
