from __future__ import annotations

import pytest

from linkbridge.contracts.config import ConnectorConfig
from linkbridge.contracts.connector import ValueConnector
from linkbridge.contracts.dependency import Dependency
from linkbridge.contracts.exceptions import MalformedPayloadError
from linkbridge.contracts.identity import EntityCategory
from linkbridge.core.connectors.link_picker import LinkPickerValueConnector
from linkbridge.core.identity.resolver import IdentityResolver
from tests.fakes.entities import HOME_KEY, LOGO_KEY
from tests.fakes.host import FakeContent, FakeProperty

HOME = '{"id":123,"name":"Home","url":null,"target":null,"hashtarget":null}'


def test_connector_is_a_value_connector(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver)

    assert isinstance(connector, ValueConnector)
    assert connector.property_editor_aliases == ("Gibe.LinkPicker",)


def test_connector_requires_resolver() -> None:
    with pytest.raises(ValueError, match="resolver"):
        LinkPickerValueConnector(None)  # type: ignore[arg-type]


def test_aliases_come_from_config(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver, config=ConnectorConfig(property_editor_aliases=["A", "B"]))

    assert connector.property_editor_aliases == ("A", "B")


def test_get_value_exports_property_value(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver)
    dependencies: list[Dependency] = []

    exported = connector.get_value(FakeProperty(alias="link", value=HOME), dependencies)

    assert exported.startswith(f'{{"id":"{HOME_KEY}",')
    assert len(dependencies) == 1


@pytest.mark.parametrize("prop", [None, FakeProperty(alias="link", value=None), FakeProperty(alias="link", value=42)])
def test_get_value_treats_missing_or_non_text_values_as_empty(
    resolver: IdentityResolver, prop: FakeProperty | None
) -> None:
    connector = LinkPickerValueConnector(resolver)
    dependencies: list[Dependency] = []

    assert connector.get_value(prop, dependencies) == ""
    assert dependencies == []


def test_get_value_propagates_malformed_values(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver)

    with pytest.raises(MalformedPayloadError):
        connector.get_value(FakeProperty(alias="link", value="<a href='/'>"), [])


def test_set_value_stores_imported_value(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver)
    content = FakeContent()

    connector.set_value(content, "link", f'{{"id":"{HOME_KEY}","name":"Home","url":null,"target":null,"hashtarget":null}}')

    assert content.get_value("link") == HOME


@pytest.mark.parametrize("value", [None, "", "  "])
def test_set_value_stores_empty_values_as_empty_text(resolver: IdentityResolver, value: str | None) -> None:
    connector = LinkPickerValueConnector(resolver)
    content = FakeContent()

    connector.set_value(content, "link", value)

    assert content.set_calls == [("link", "")]


def test_set_value_leaves_content_untouched_on_malformed_value(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver)
    content = FakeContent(values={"link": HOME})

    with pytest.raises(MalformedPayloadError):
        connector.set_value(content, "link", "{")

    assert content.set_calls == []
    assert content.get_value("link") == HOME


def test_configured_category_is_used_in_both_directions(resolver: IdentityResolver) -> None:
    connector = LinkPickerValueConnector(resolver, config=ConnectorConfig(entity_category=EntityCategory.MEDIA))
    content = FakeContent()
    dependencies: list[Dependency] = []

    exported = connector.get_value(FakeProperty(alias="logo", value='{"id":2001,"name":"Logo"}'), dependencies)
    connector.set_value(content, "logo", exported)

    assert dependencies[0].identifier.key == LOGO_KEY
    assert content.get_value("logo") == '{"id":2001,"name":"Logo","url":null,"target":null,"hashtarget":null}'
