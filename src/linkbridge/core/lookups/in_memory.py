"""In-memory entity lookup backed by a two-way id/key table."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any
from uuid import UUID

from pydantic import Field, RootModel, ValidationError

from linkbridge.contracts.exceptions import IdentityMapError
from linkbridge.contracts.identity import EntityCategory
from linkbridge.contracts.lookup import EntityLookup
from linkbridge.contracts.refs import INT32_MAX, INT32_MIN

LocalId = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class IdentityMapFile(RootModel[dict[EntityCategory, dict[LocalId, UUID]]]):
    """On-disk identity map: ``{"document": {"1234": "<guid>"}}``."""


class InMemoryEntityLookup(EntityLookup):
    """Lookup over ids registered up front.

    Each category is a one-to-one mapping; registering a second key for an id
    (or a second id for a key) is rejected.
    """

    def __init__(self) -> None:
        self._keys: dict[tuple[EntityCategory, int], UUID] = {}
        self._ids: dict[tuple[EntityCategory, UUID], int] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def register(self, category: EntityCategory, local_id: int, key: UUID) -> None:
        category = EntityCategory(category)
        existing_key = self._keys.get((category, local_id))
        if existing_key is not None and existing_key != key:
            raise IdentityMapError(f"{category} id {local_id} already maps to {existing_key}, not {key}")
        existing_id = self._ids.get((category, key))
        if existing_id is not None and existing_id != local_id:
            raise IdentityMapError(f"{category} key {key} already maps to id {existing_id}, not {local_id}")
        self._keys[(category, local_id)] = key
        self._ids[(category, key)] = local_id

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Mapping[Any, Any]]) -> InMemoryEntityLookup:
        """Build a lookup from ``{category: {local_id: key}}``, coercing string forms."""
        try:
            parsed = IdentityMapFile.model_validate(mapping)
        except ValidationError as exc:
            raise IdentityMapError(f"invalid identity map: {exc}") from exc
        lookup = cls()
        for category, entries in parsed.root.items():
            for local_id, key in entries.items():
                lookup.register(category, local_id, key)
        return lookup

    def lookup_stable_for(self, local_id: int, category: EntityCategory) -> UUID | None:
        return self._keys.get((category, local_id))

    def lookup_local_for(self, key: UUID, category: EntityCategory) -> int | None:
        return self._ids.get((category, key))


def load_identity_map(path: str | Path) -> InMemoryEntityLookup:
    path = Path(path)
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise IdentityMapError(f"invalid identity map file: {path}") from exc
    if not isinstance(payload, dict):
        raise IdentityMapError(f"invalid identity map file: {path}")
    return InMemoryEntityLookup.from_mapping(payload)
