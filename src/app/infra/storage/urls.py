"""URL pública de objetos (bucket publicamente legível por convenção)."""

from __future__ import annotations

from urllib.parse import quote

from config.settings import GCS_PUBLIC_BASE_URL


def build_public_url(bucket: str, path: str, base_url: str = GCS_PUBLIC_BASE_URL) -> str:
    """Monta `{base_url}/{bucket}/{path}` sem chamada de rede."""
    return f"{base_url.rstrip('/')}/{bucket}/{quote(path.lstrip('/'), safe='/')}"
