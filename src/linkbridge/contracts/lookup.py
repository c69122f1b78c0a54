"""Entity lookup contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from linkbridge.contracts.identity import EntityCategory


class EntityLookup(ABC):
    """Read-only mapping between local integer ids and stable keys.

    A miss returns ``None``; it is an expected outcome, not an error.
    """

    @abstractmethod
    def lookup_stable_for(self, local_id: int, category: EntityCategory) -> UUID | None: ...  # pragma: no cover

    @abstractmethod
    def lookup_local_for(self, key: UUID, category: EntityCategory) -> int | None: ...  # pragma: no cover
