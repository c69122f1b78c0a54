"""Link payload model and its JSON wire codec."""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from linkbridge.contracts.exceptions import MalformedPayloadError
from linkbridge.contracts.refs import EntityRef, UnsetRef, as_entity_ref


class LinkPayload(BaseModel):
    """Stored value of a link picker property.

    Field declaration order is the wire key order: ``id``, ``name``, ``url``,
    ``target``, ``hashtarget``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ref: EntityRef = Field(default_factory=UnsetRef, alias="id")
    display_name: str | None = Field(default=None, alias="name")
    url: str | None = None
    link_target: str | None = Field(default=None, alias="target")
    anchor: str | None = Field(default=None, alias="hashtarget")

    @field_validator("ref", mode="before")
    @classmethod
    def _classify_ref(cls, value: Any) -> EntityRef:
        return as_entity_ref(value)

    @field_serializer("ref")
    def _ref_wire_value(self, ref: EntityRef) -> Any:
        return ref.raw


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def decode_payload(text: str) -> LinkPayload:
    """Parse stored link text.

    Raises:
        MalformedPayloadError: If the text is not a JSON object of the expected shape.
    """
    try:
        raw: Any = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except ValueError as exc:
        reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
        raise MalformedPayloadError(f"link value is not valid JSON: {reason}", raw=text) from exc
    if not isinstance(raw, dict):
        raise MalformedPayloadError(
            f"link value must be a JSON object, got {type(raw).__name__}",
            raw=text,
        )
    try:
        return LinkPayload.model_validate(raw)
    except ValidationError as exc:
        raise MalformedPayloadError(f"invalid link value: {exc}", raw=text) from exc


def encode_payload(payload: LinkPayload) -> str:
    dumped = payload.model_dump(by_alias=True)
    return json.dumps(dumped, separators=(",", ":"), ensure_ascii=False)
