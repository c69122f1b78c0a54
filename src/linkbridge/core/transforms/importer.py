"""Portable → local transform for link values."""

from __future__ import annotations

import logging

from linkbridge.contracts.identity import EntityCategory
from linkbridge.contracts.refs import local_ref
from linkbridge.core.identity.resolver import IdentityResolver
from linkbridge.core.payload.codec import decode_payload, encode_payload

logger = logging.getLogger(__name__)


def import_value(
    raw: str | None,
    resolver: IdentityResolver,
    *,
    category: EntityCategory = EntityCategory.DOCUMENT,
) -> str:
    """Rewrite a transferred link value for storage in this environment.

    A stable key that resolves here is replaced by the local integer id, which
    is what the link picker looks content up by. Anything else is kept.

    Raises:
        MalformedPayloadError: If ``raw`` is not a valid link value.
    """
    if raw is None or not raw.strip():
        return ""

    payload = decode_payload(raw)
    local_id = resolver.resolve_to_local(payload.ref, category)
    if local_id is None:
        return encode_payload(payload)

    logger.debug("resolved %s key %r to local id %d", category, payload.ref.raw, local_id)
    return encode_payload(payload.model_copy(update={"ref": local_ref(local_id)}))
