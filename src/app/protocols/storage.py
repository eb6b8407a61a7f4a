"""Protocolo de armazenamento de objetos (GCS ou memória)."""

from __future__ import annotations

from typing import Protocol


class ObjectStorageProtocol(Protocol):
    """Contrato de upload/cópia de objetos e URL pública.

    Upload e cópia levantam StorageError em falha; não há retry.
    """

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> None: ...

    async def copy(self, bucket: str, source_path: str, dest_path: str) -> None: ...

    def public_url(self, bucket: str, path: str) -> str: ...
