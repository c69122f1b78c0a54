"""Entity reference variants carried in a link payload's ``id`` field.

The ``id`` field holds a local integer id in one environment and a stable key in
the portable form. Decoding classifies the raw JSON value once into one of the
variants below; each variant keeps the exact JSON value it was decoded from so a
reference left untouched is written back unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, TypeAlias
from uuid import UUID

from linkbridge.contracts.identity import UDI_SCHEME, StableIdentifier

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_LOCAL_RE = re.compile(r"\s*[+-]?[0-9]+\s*")
_DASHED = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_GUID_FORMS = (
    re.compile(r"[0-9a-f]{32}", re.IGNORECASE),
    re.compile(_DASHED, re.IGNORECASE),
    re.compile(r"\{" + _DASHED + r"\}", re.IGNORECASE),
    re.compile(r"\(" + _DASHED + r"\)", re.IGNORECASE),
)
_UDI_RE = re.compile(UDI_SCHEME + r"://([a-z][a-z0-9-]*)/([0-9a-f]{32})", re.IGNORECASE)


@dataclass(frozen=True)
class UnsetRef:
    """No entity reference; the link is a plain external link."""

    raw: str | None = None


@dataclass(frozen=True)
class LocalRef:
    id: int
    raw: Any


@dataclass(frozen=True)
class StableRef:
    key: UUID
    raw: Any
    entity_type: str | None = None


@dataclass(frozen=True)
class OpaqueRef:
    """A value that is neither a local id nor a stable key."""

    raw: Any


EntityRef: TypeAlias = UnsetRef | LocalRef | StableRef | OpaqueRef
ENTITY_REF_TYPES = (UnsetRef, LocalRef, StableRef, OpaqueRef)


def parse_local_id(raw: Any) -> int | None:
    """Return the 32-bit local id encoded by ``raw``, or ``None`` if it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            return None
        value = int(raw)
    elif isinstance(raw, str) and _LOCAL_RE.fullmatch(raw):
        value = int(raw.strip())
    else:
        return None
    if INT32_MIN <= value <= INT32_MAX:
        return value
    return None


def parse_stable_key(raw: Any) -> tuple[UUID, str | None] | None:
    """Return ``(key, entity_type)`` for a GUID or UDI string, or ``None``.

    Plain GUID strings carry no entity type.
    """
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    udi = _UDI_RE.fullmatch(text)
    if udi is not None:
        return UUID(hex=udi.group(2)), udi.group(1).lower()
    for form in _GUID_FORMS:
        if form.fullmatch(text):
            return UUID(hex=text.strip("{}()")), None
    return None


def parse_entity_ref(raw: Any) -> EntityRef:
    if raw is None or raw == "":
        return UnsetRef(raw=raw)
    local_id = parse_local_id(raw)
    if local_id is not None:
        return LocalRef(id=local_id, raw=raw)
    stable = parse_stable_key(raw)
    if stable is not None:
        key, entity_type = stable
        return StableRef(key=key, raw=raw, entity_type=entity_type)
    return OpaqueRef(raw=raw)


def as_entity_ref(value: Any) -> EntityRef:
    """Return ``value`` if it is already a reference variant, else classify it."""
    if isinstance(value, ENTITY_REF_TYPES):
        return value
    return parse_entity_ref(value)


def local_ref(local_id: int) -> LocalRef:
    """Build the reference written into a payload after resolving to a local id."""
    return LocalRef(id=local_id, raw=local_id)


def stable_ref(identifier: StableIdentifier) -> StableRef:
    """Build the reference written into a payload after resolving to a stable key.

    The wire value is the dashed GUID string, not the UDI.
    """
    return StableRef(key=identifier.key, raw=str(identifier.key), entity_type=identifier.entity_type)
