"""Dependency records emitted during export."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from linkbridge.contracts.identity import StableIdentifier


class DependencyMode(StrEnum):
    EXIST = "exist"
    MATCH = "match"


class Dependency(BaseModel):
    """An entity that must be present in the destination before a value is applied."""

    model_config = ConfigDict(frozen=True)

    identifier: StableIdentifier
    is_required_at_apply_time: bool = False
    mode: DependencyMode = DependencyMode.EXIST

    @property
    def udi(self) -> str:
        return self.identifier.uri


class DependencySink(Protocol):
    def append(self, dependency: Dependency, /) -> None: ...  # pragma: no cover
