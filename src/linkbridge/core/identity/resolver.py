"""Best-effort translation between local ids and stable identifiers."""

from __future__ import annotations

import logging
from typing import Any

from linkbridge.contracts.identity import EntityCategory, StableIdentifier
from linkbridge.contracts.lookup import EntityLookup
from linkbridge.contracts.refs import LocalRef, StableRef, as_entity_ref

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Resolve entity references in either direction through an :class:`EntityLookup`.

    Both directions return ``None`` rather than raising when the value has the
    wrong shape or the lookup has no mapping; a link may legitimately point at
    something that does not exist here.
    """

    def __init__(self, lookup: EntityLookup) -> None:
        self._lookup = lookup

    @property
    def lookup(self) -> EntityLookup:
        return self._lookup

    def resolve_to_stable(self, value: Any, category: EntityCategory) -> StableIdentifier | None:
        ref = as_entity_ref(value)
        if not isinstance(ref, LocalRef):
            logger.debug("not a local %s id: %r", category, ref.raw)
            return None
        key = self._lookup.lookup_stable_for(ref.id, category)
        if key is None:
            logger.debug("no stable key for local %s id %d", category, ref.id)
            return None
        return StableIdentifier.for_category(category, key)

    def resolve_to_local(self, value: Any, category: EntityCategory) -> int | None:
        ref = as_entity_ref(value)
        if not isinstance(ref, StableRef):
            logger.debug("not a stable %s key: %r", category, ref.raw)
            return None
        if ref.entity_type is not None and ref.entity_type != category.value:
            logger.debug("stable key %r is a %s, not a %s", ref.raw, ref.entity_type, category)
            return None
        local_id = self._lookup.lookup_local_for(ref.key, category)
        if local_id is None:
            logger.debug("no local %s id for key %s", category, ref.key)
            return None
        return local_id
