"""Registro imutável de presets: texto fixo -> objeto no bucket."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class PresetRegistry:
    """Mapeamento ordenado e somente-leitura de chaves para caminhos.

    Construído uma vez no startup; nunca ganha nem perde chaves depois.
    A ordem de iteração é a ordem configurada.
    """

    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> PresetRegistry:
        """Cria registro a partir de pares (chave, caminho).

        Raises:
            ValueError: Chave/caminho vazio ou chave duplicada
        """
        entries: dict[str, str] = {}
        for key, path in pairs:
            if not key or not path:
                raise ValueError("preset com chave ou caminho vazio")
            if key in entries:
                raise ValueError(f"preset duplicado: {key}")
            entries[key] = path
        return cls(entries=MappingProxyType(entries))

    def get(self, key: str) -> str | None:
        """Caminho do objeto para a chave, ou None."""
        return self.entries.get(key)

    def keys(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
