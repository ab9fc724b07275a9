"""Capability interfaces the matcher consumes.

The matcher never constructs collators or break iterators itself. A host
supplies a CollationCapability (ICU by default) that builds both.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

from locale_index_of.domain.search import CollationOptions, ResolvedCollation
from locale_index_of.search.models import Grapheme


LocaleRequest = str | Sequence[str] | None


@runtime_checkable
class Comparator(Protocol):
    """Locale-aware three-way string comparison."""

    def compare(self, left: str, right: str) -> int:  # pragma: no cover - Protocol only
        """Return -1, 0 or 1."""

    def resolved_options(self) -> ResolvedCollation:  # pragma: no cover - Protocol only
        """Return the locale and options actually in effect."""


@runtime_checkable
class Segmenter(Protocol):
    """Splits text into grapheme clusters carrying their original offsets."""

    def segment(self, text: str) -> Iterator[Grapheme]:  # pragma: no cover - Protocol only
        """Yield clusters in order; calling twice yields identical, independent sequences."""


@runtime_checkable
class CollationCapability(Protocol):
    """Host Unicode service that builds comparators and segmenters."""

    def create_comparator(
        self, locales: LocaleRequest, options: CollationOptions
    ) -> Comparator:  # pragma: no cover - Protocol only
        """Build a search-usage comparator; raise ConfigurationError for bad tags."""

    def create_segmenter(self, locale: str) -> Segmenter | None:  # pragma: no cover - Protocol only
        """Return a locale-aware grapheme segmenter, or None when unavailable."""
