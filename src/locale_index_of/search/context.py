"""Haystack context: a haystack segmented and filtered once, searched many times."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Any

from locale_index_of.domain.search import CollationOptions
from locale_index_of.search.filters import ConsideredFilter
from locale_index_of.search.models import Grapheme
from locale_index_of.search.protocols import CollationCapability, Comparator, LocaleRequest, Segmenter
from locale_index_of.search.segmenters import select_segmenter


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HaystackContext:
    """Immutable bundle shared by every search against one haystack.

    ``graphemes`` holds only considered graphemes, each with its offset in
    the untouched original haystack.
    """

    comparator: Comparator
    filter: ConsideredFilter
    segmenter: Segmenter
    graphemes: tuple[Grapheme, ...]

    def considered(self, text: str) -> list[Grapheme]:
        """Segment and filter arbitrary text (typically a needle) the same way."""
        return list(self.filter(self.segmenter.segment(text)))


def resolve_comparator(
    capability: CollationCapability,
    locales: LocaleRequest | Comparator,
    options: CollationOptions,
) -> Comparator:
    """Use a pre-built comparator as-is, otherwise ask the capability for one."""
    if isinstance(locales, Comparator):
        return locales
    return capability.create_comparator(locales, options)


def build_context(
    capability: CollationCapability,
    haystack: str,
    locales: LocaleRequest | Comparator = None,
    options: CollationOptions | Mapping[str, Any] | None = None,
    *,
    segmenter_preference: str = "icu",
) -> HaystackContext:
    """Resolve comparator and segmenter, then segment and filter ``haystack`` once."""
    collation = CollationOptions.coerce(options)
    comparator = resolve_comparator(capability, locales, collation)
    resolved = comparator.resolved_options()
    segmenter = select_segmenter(capability, resolved.locale, segmenter_preference)
    considered_filter = ConsideredFilter(comparator, ignore_numbers=collation.ignore_numbers)

    graphemes = tuple(considered_filter(segmenter.segment(haystack)))
    logger.debug(
        "Built haystack context: %d considered graphemes (locale=%s, sensitivity=%s)",
        len(graphemes),
        resolved.locale,
        resolved.sensitivity,
    )
    return HaystackContext(
        comparator=comparator,
        filter=considered_filter,
        segmenter=segmenter,
        graphemes=graphemes,
    )
