"""Local → portable transform for link values."""

from __future__ import annotations

import logging

from linkbridge.contracts.dependency import Dependency, DependencyMode, DependencySink
from linkbridge.contracts.identity import EntityCategory
from linkbridge.contracts.refs import stable_ref
from linkbridge.core.identity.resolver import IdentityResolver
from linkbridge.core.payload.codec import decode_payload, encode_payload

logger = logging.getLogger(__name__)


def export_value(
    raw: str | None,
    dependencies: DependencySink,
    resolver: IdentityResolver,
    *,
    category: EntityCategory = EntityCategory.DOCUMENT,
) -> str:
    """Rewrite a stored link value for transfer to another environment.

    A local entity id that resolves is replaced by the entity's stable key and
    recorded in ``dependencies`` so the entity is transferred first. Anything
    that does not resolve is written back as it was.

    Raises:
        MalformedPayloadError: If ``raw`` is not a valid link value. Nothing is
            appended to ``dependencies`` in that case.
    """
    if raw is None or not raw.strip():
        return ""

    payload = decode_payload(raw)
    identifier = resolver.resolve_to_stable(payload.ref, category)
    if identifier is None:
        return encode_payload(payload)

    dependencies.append(
        Dependency(identifier=identifier, is_required_at_apply_time=False, mode=DependencyMode.EXIST)
    )
    logger.debug("recorded dependency %s for local %s id %r", identifier, category, payload.ref.raw)
    return encode_payload(payload.model_copy(update={"ref": stable_ref(identifier)}))
