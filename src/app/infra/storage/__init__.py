"""Storage: implementações concretas de ObjectStorageProtocol.

Módulos disponíveis:
    - gcs_storage: Google Cloud Storage
    - memory_storage: em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.storage.memory_storage import MemoryObjectStorage, StoredObject
from app.infra.storage.urls import build_public_url

__all__ = [
    "MemoryObjectStorage",
    "StoredObject",
    "build_public_url",
]
