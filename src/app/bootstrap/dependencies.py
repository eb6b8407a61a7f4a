"""Factories de dependências: storage, cliente LINE e roteador de eventos.

Centraliza a criação de implementações concretas a partir das settings.
O roteador resultante fica em `app.state.event_router`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.line import create_line_messaging_client
from app.coordinators.line.inbound import LineEventRouter
from app.domain.admins import AdminSet
from app.domain.presets import PresetRegistry
from app.infra.storage import MemoryObjectStorage
from app.use_cases.line import BindPresetImageUseCase
from config.settings import get_gcs_settings, get_line_settings

if TYPE_CHECKING:
    from app.protocols.messaging_client import LineMessagingProtocol
    from app.protocols.storage import ObjectStorageProtocol
    from config.settings import GCSSettings, LineSettings

logger = logging.getLogger(__name__)


def create_object_storage(settings: GCSSettings | None = None) -> ObjectStorageProtocol:
    """Cria storage de objetos conforme STORAGE_BACKEND.

    - "gcs": GcsObjectStorage (staging/production)
    - "memory": MemoryObjectStorage (dev only)

    Raises:
        ValueError: Backend desconhecido
    """
    gcs = settings or get_gcs_settings()

    if gcs.backend == "gcs":
        from app.bootstrap.clients import create_storage_client
        from app.infra.storage.gcs_storage import GcsObjectStorage

        storage = GcsObjectStorage(create_storage_client(), gcs.public_base_url)
        logger.info("object_storage_created", extra={"backend": "gcs"})
        return storage

    if gcs.backend == "memory":
        logger.warning("object_storage_created", extra={"backend": "memory"})
        return MemoryObjectStorage(gcs.public_base_url)

    msg = f"STORAGE_BACKEND inválido: {gcs.backend}"
    raise ValueError(msg)


def create_event_router(
    line_settings: LineSettings | None = None,
    gcs_settings: GCSSettings | None = None,
    messaging: LineMessagingProtocol | None = None,
    storage: ObjectStorageProtocol | None = None,
) -> LineEventRouter:
    """Monta o roteador de eventos com todas as dependências.

    Args:
        line_settings: Settings do LINE (default: ambiente)
        gcs_settings: Settings do GCS (default: ambiente)
        messaging: Cliente de mensagens (default: LineMessagingClient)
        storage: Storage de objetos (default: conforme STORAGE_BACKEND)
    """
    line = line_settings or get_line_settings()
    gcs = gcs_settings or get_gcs_settings()

    registry = PresetRegistry.from_pairs(line.presets)
    admins = AdminSet.from_ids(line.admin_user_ids)
    messaging = messaging or create_line_messaging_client(line)
    storage = storage or create_object_storage(gcs)

    binding = BindPresetImageUseCase(
        messaging=messaging,
        storage=storage,
        bucket=gcs.bucket,
        registry=registry,
        admins=admins,
        upload_prefix=gcs.upload_prefix,
    )
    router = LineEventRouter(
        messaging=messaging,
        storage=storage,
        bucket=gcs.bucket,
        registry=registry,
        binding=binding,
        echo_prefix=line.echo_prefix,
    )
    logger.info(
        "event_router_created",
        extra={"presets": len(registry), "admins": len(admins), "bucket": gcs.bucket},
    )
    return router
