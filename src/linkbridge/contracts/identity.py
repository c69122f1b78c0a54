"""Entity identity contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

UDI_SCHEME = "umb"

LocalIdentifier = int


class EntityCategory(StrEnum):
    DOCUMENT = "document"
    MEDIA = "media"
    MEMBER = "member"


@dataclass(frozen=True)
class StableIdentifier:
    """Environment-independent identifier for one entity, tagged with its entity type.

    The string form is a UDI such as ``umb://document/4fb2a7a2c1e24b3c9a3b8f1d2e6c7a90``.
    """

    entity_type: str
    key: UUID

    @classmethod
    def for_category(cls, category: EntityCategory, key: UUID) -> StableIdentifier:
        return cls(entity_type=category.value, key=key)

    @property
    def uri(self) -> str:
        return f"{UDI_SCHEME}://{self.entity_type}/{self.key.hex}"

    def __str__(self) -> str:
        return self.uri
