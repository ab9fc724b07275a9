"""Locale-aware substring search over grapheme clusters."""

from locale_index_of.domain.search import NO_MATCH, CollationOptions, MatchResult, ResolvedCollation
from locale_index_of.errors import ConfigurationError
from locale_index_of.locale_search import (
    LocaleSearch,
    build_haystack_context,
    find_all,
    index_of,
    make_search,
    search,
)
from locale_index_of.search.context import HaystackContext
from locale_index_of.search.icu_collation import IcuCollation, IcuComparator, IcuGraphemeSegmenter
from locale_index_of.search.protocols import CollationCapability, Comparator, Segmenter
from locale_index_of.search.segmenters import CodeUnitSegmenter


__all__ = [
    "NO_MATCH",
    "CodeUnitSegmenter",
    "CollationCapability",
    "CollationOptions",
    "Comparator",
    "ConfigurationError",
    "HaystackContext",
    "IcuCollation",
    "IcuComparator",
    "IcuGraphemeSegmenter",
    "LocaleSearch",
    "MatchResult",
    "ResolvedCollation",
    "Segmenter",
    "build_haystack_context",
    "find_all",
    "index_of",
    "make_search",
    "search",
]
