"""Storage de objetos no Google Cloud Storage.

O SDK Python do GCS é síncrono; as chamadas rodam em
asyncio.to_thread para não bloquear o event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from google.api_core import exceptions as gcp_exceptions

from app.infra.storage.urls import build_public_url
from config.settings import GCS_PUBLIC_BASE_URL
from utils.errors import StorageError, StorageObjectNotFoundError

if TYPE_CHECKING:
    from google.cloud.storage import Client as StorageClient

logger = logging.getLogger(__name__)


class GcsObjectStorage:
    """Upload, cópia e URL pública de objetos no GCS.

    Args:
        client: Cliente google.cloud.storage
        public_base_url: Host das URLs públicas
    """

    def __init__(
        self,
        client: StorageClient,
        public_base_url: str = GCS_PUBLIC_BASE_URL,
    ) -> None:
        self._client = client
        self._public_base_url = public_base_url

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> None:
        """Cria (ou sobrescreve) o objeto `bucket/path`.

        Raises:
            StorageError: Falha na API do GCS
        """
        await asyncio.to_thread(self._upload_sync, bucket, path, data, content_type)
        logger.info(
            "gcs_object_uploaded",
            extra={"bucket": bucket, "path": path, "size_bytes": len(data)},
        )

    def _upload_sync(self, bucket: str, path: str, data: bytes, content_type: str) -> None:
        blob = self._client.bucket(bucket).blob(path)
        try:
            blob.upload_from_string(data, content_type=content_type)
        except gcp_exceptions.GoogleAPIError as exc:
            raise StorageError(f"falha no upload de {bucket}/{path}: {exc}") from exc

    async def copy(self, bucket: str, source_path: str, dest_path: str) -> None:
        """Copia objeto dentro do mesmo bucket, sobrescrevendo o destino.

        Raises:
            StorageObjectNotFoundError: Origem não existe
            StorageError: Outra falha na API do GCS
        """
        await asyncio.to_thread(self._copy_sync, bucket, source_path, dest_path)
        logger.info(
            "gcs_object_copied",
            extra={"bucket": bucket, "source_path": source_path, "dest_path": dest_path},
        )

    def _copy_sync(self, bucket: str, source_path: str, dest_path: str) -> None:
        gcs_bucket = self._client.bucket(bucket)
        source_blob = gcs_bucket.blob(source_path)
        try:
            gcs_bucket.copy_blob(source_blob, gcs_bucket, new_name=dest_path)
        except gcp_exceptions.NotFound as exc:
            raise StorageObjectNotFoundError(
                f"objeto não encontrado: {bucket}/{source_path}"
            ) from exc
        except gcp_exceptions.GoogleAPIError as exc:
            raise StorageError(
                f"falha ao copiar {bucket}/{source_path} -> {dest_path}: {exc}"
            ) from exc

    def public_url(self, bucket: str, path: str) -> str:
        return build_public_url(bucket, path, self._public_base_url)
