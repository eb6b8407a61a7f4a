"""Exceções de domínio para falhas de infraestrutura e configuração."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida no startup."""


class UpstreamCallError(RuntimeError):
    """Base para falhas em chamadas à API do LINE ou ao storage."""


class ContentFetchError(UpstreamCallError):
    """Falha ao baixar o conteúdo de uma mensagem do LINE."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StorageError(UpstreamCallError):
    """Falha ao gravar ou copiar objeto no storage."""


class StorageObjectNotFoundError(StorageError):
    """Objeto de origem não existe no bucket."""
