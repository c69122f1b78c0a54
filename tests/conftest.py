"""Shared test fixtures for linkbridge tests."""

from __future__ import annotations

import pytest

from linkbridge.contracts.identity import EntityCategory
from linkbridge.core.identity.resolver import IdentityResolver
from linkbridge.core.lookups.in_memory import InMemoryEntityLookup
from tests.fakes.entities import ABOUT_ID, ABOUT_KEY, HOME_ID, HOME_KEY, LOGO_ID, LOGO_KEY
from tests.fakes.lookup import SpyLookup


@pytest.fixture
def lookup() -> InMemoryEntityLookup:
    """Lookup with two documents and one media item."""
    lookup = InMemoryEntityLookup()
    lookup.register(EntityCategory.DOCUMENT, HOME_ID, HOME_KEY)
    lookup.register(EntityCategory.DOCUMENT, ABOUT_ID, ABOUT_KEY)
    lookup.register(EntityCategory.MEDIA, LOGO_ID, LOGO_KEY)
    return lookup


@pytest.fixture
def spy_lookup(lookup: InMemoryEntityLookup) -> SpyLookup:
    return SpyLookup(lookup)


@pytest.fixture
def resolver(spy_lookup: SpyLookup) -> IdentityResolver:
    return IdentityResolver(spy_lookup)
