"""Fixtures shared by unit tests."""

import pytest

from locale_index_of.config import Settings
from locale_index_of.locale_search import LocaleSearch
from locale_index_of.search.icu_collation import IcuCollation
from tests.fixtures.collation import FoldingCollation, FoldingComparator


@pytest.fixture
def settings():
    return Settings()  # type: ignore[call-arg]


@pytest.fixture
def icu_collation(settings):
    return IcuCollation(settings)


@pytest.fixture
def locale_search(icu_collation, settings):
    return LocaleSearch(icu_collation, settings)


@pytest.fixture
def folding_collation():
    return FoldingCollation()


@pytest.fixture
def folding_comparator():
    return FoldingComparator()
