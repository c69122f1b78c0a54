from __future__ import annotations

import json
from pathlib import Path

import pytest

from linkbridge.contracts.exceptions import ConfigError
from linkbridge.contracts.identity import EntityCategory
from linkbridge.core.config.loader import load_config


def _write_config(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "linkbridge.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_config_resolves_relative_identity_map_path(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"identity_map_path": "maps/ids.json", "entity_category": "document"})

    config = load_config(path)

    assert config.identity_map_path == (tmp_path / "maps" / "ids.json").resolve()
    assert config.entity_category == EntityCategory.DOCUMENT


def test_load_config_keeps_absolute_paths(tmp_path: Path) -> None:
    absolute = (tmp_path / "elsewhere" / "ids.json").resolve()
    path = _write_config(tmp_path, {"identity_map_path": str(absolute)})

    assert load_config(path).identity_map_path == absolute


def test_load_config_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, {}))

    assert config.property_editor_aliases == ["Gibe.LinkPicker"]
    assert config.identity_map_path is None


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "linkbridge.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(path)


def test_load_config_invalid_values(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"property_editor_aliases": []})

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(path)
