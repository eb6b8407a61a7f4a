"""Storage de objetos em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios
e sem URLs servíveis de verdade.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.infra.storage.urls import build_public_url
from config.settings import GCS_PUBLIC_BASE_URL
from utils.errors import StorageObjectNotFoundError


@dataclass(frozen=True, slots=True)
class StoredObject:
    """Objeto armazenado em memória."""

    data: bytes
    content_type: str


class MemoryObjectStorage:
    """Storage em memória com a mesma semântica do GCS (last-writer-wins)."""

    def __init__(self, public_base_url: str = GCS_PUBLIC_BASE_URL) -> None:
        self._objects: dict[tuple[str, str], StoredObject] = {}
        self._public_base_url = public_base_url

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> None:
        self._objects[(bucket, path)] = StoredObject(data=data, content_type=content_type)

    async def copy(self, bucket: str, source_path: str, dest_path: str) -> None:
        source = self._objects.get((bucket, source_path))
        if source is None:
            raise StorageObjectNotFoundError(f"objeto não encontrado: {bucket}/{source_path}")
        self._objects[(bucket, dest_path)] = source

    def public_url(self, bucket: str, path: str) -> str:
        return build_public_url(bucket, path, self._public_base_url)

    def get(self, bucket: str, path: str) -> StoredObject | None:
        """Leitura direta (inspeção em testes)."""
        return self._objects.get((bucket, path))

    def exists(self, bucket: str, path: str) -> bool:
        return (bucket, path) in self._objects
