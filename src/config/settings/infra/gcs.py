"""Settings do Google Cloud Storage.

Bucket onde ficam as imagens dos presets e os uploads temporários.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

StorageBackend = Literal["gcs", "memory"]

GCS_PUBLIC_BASE_URL: str = "https://storage.googleapis.com"


@dataclass(frozen=True)
class GCSSettings:
    """Configurações do Google Cloud Storage.

    Attributes:
        bucket: Bucket com imagens de preset e uploads pendentes
        public_base_url: Host das URLs públicas dos objetos
        upload_prefix: Prefixo dos objetos temporários (uploads/<id>.jpg)
        backend: Implementação de storage (gcs|memory)
    """

    bucket: str = ""
    public_base_url: str = GCS_PUBLIC_BASE_URL
    upload_prefix: str = "uploads"
    backend: StorageBackend = "gcs"

    def validate(self) -> list[str]:
        """Valida configurações do GCS.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.bucket:
            errors.append("GCS_BUCKET não configurado")

        if self.backend not in ("gcs", "memory"):
            errors.append(f"STORAGE_BACKEND inválido: {self.backend}")

        if not self.upload_prefix or "/" in self.upload_prefix.strip("/"):
            errors.append("GCS_UPLOAD_PREFIX deve ser um único segmento de caminho")

        return errors


def _load_gcs_from_env() -> GCSSettings:
    """Carrega GCSSettings de variáveis de ambiente."""
    return GCSSettings(
        bucket=os.getenv("GCS_BUCKET", "").strip(),
        public_base_url=os.getenv("GCS_PUBLIC_BASE_URL", GCS_PUBLIC_BASE_URL).rstrip("/"),
        upload_prefix=os.getenv("GCS_UPLOAD_PREFIX", "uploads").strip("/"),
        backend=os.getenv("STORAGE_BACKEND", "gcs").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_gcs_settings() -> GCSSettings:
    """Retorna instância cacheada de GCSSettings."""
    return _load_gcs_from_env()
