"""Grapheme segmenters and the composition-time choice between them.

Two interchangeable implementations satisfy the Segmenter protocol:

- the capability's locale-aware segmenter (ICU break iterator), preferred;
- CodeUnitSegmenter, one cluster per code point, used only when no
  locale-aware segmenter is available or the naive one is forced by
  configuration. It splits a base letter from its combining marks, so
  "e" + U+0301 becomes two clusters and window widths can be off by one.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import TYPE_CHECKING, Literal

from locale_index_of.search.models import Grapheme


if TYPE_CHECKING:
    from locale_index_of.search.protocols import CollationCapability, Segmenter

logger = logging.getLogger(__name__)


class CodeUnitSegmenter:
    """Fallback segmenter that treats every code point as its own cluster."""

    def segment(self, text: str) -> Iterator[Grapheme]:
        for offset, char in enumerate(text):
            yield Grapheme(offset=offset, text=char)

    def __repr__(self) -> str:
        return "CodeUnitSegmenter()"


def select_segmenter(
    capability: CollationCapability,
    locale: str,
    preference: Literal["icu", "naive"] = "icu",
) -> Segmenter:
    """Pick the segmenter for a resolved locale, once, before any matching."""
    if preference == "naive":
        return CodeUnitSegmenter()

    segmenter = capability.create_segmenter(locale)
    if segmenter is not None:
        return segmenter

    logger.warning(
        "No locale-aware grapheme segmenter for %s; combining sequences will be split per code point",
        locale,
    )
    return CodeUnitSegmenter()
