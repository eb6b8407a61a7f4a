"""Factories de clientes externos: Google Cloud Storage.

O SDK do Google é importado localmente para que testes e o backend
em memória não dependam de credenciais.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from google.cloud.storage import Client as StorageClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_storage_client() -> StorageClient:
    """Cria cliente GCS (singleton).

    Usa Application Default Credentials (service account no Cloud Run).

    Returns:
        Cliente google.cloud.storage configurado
    """
    from google.cloud import storage

    client = storage.Client()
    logger.info("gcs_client_created", extra={"project": client.project})
    return client
