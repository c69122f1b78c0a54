"""Connector configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from linkbridge.contracts.identity import EntityCategory

DEFAULT_EDITOR_ALIASES = ("Gibe.LinkPicker",)


class ConnectorConfig(BaseModel):
    property_editor_aliases: list[str] = Field(default_factory=lambda: list(DEFAULT_EDITOR_ALIASES))
    entity_category: EntityCategory = EntityCategory.DOCUMENT
    identity_map_path: Path | None = None

    @field_validator("property_editor_aliases")
    @classmethod
    def _require_aliases(cls, value: list[str]) -> list[str]:
        aliases = [alias.strip() for alias in value if alias.strip()]
        if not aliases:
            raise ValueError("property_editor_aliases must contain at least one alias")
        return aliases
