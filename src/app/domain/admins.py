"""Conjunto de administradores autorizados a enviar imagens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AdminSet:
    """IDs de usuário com permissão de upload (igualdade exata de string)."""

    user_ids: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_ids(cls, user_ids: Iterable[str]) -> AdminSet:
        return cls(user_ids=frozenset(uid for uid in user_ids if uid))

    def is_admin(self, user_id: str | None) -> bool:
        """Origem sem user_id nunca é admin."""
        if not user_id:
            return False
        return user_id in self.user_ids

    def __len__(self) -> int:
        return len(self.user_ids)
