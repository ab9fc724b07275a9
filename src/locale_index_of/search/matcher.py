"""Grapheme-aware sliding-window matcher.

A window of ``L`` considered haystack graphemes (``L`` = considered graphemes
in the needle) slides one considered grapheme at a time. Each full window is
joined and compared to the needle as a whole string: collation equality does
not hold grapheme by grapheme (a composed "é" against "e" + U+0301 only
compares equal as part of the complete text).

Worst case is one comparison per window position, O(n * L).
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

from locale_index_of.domain.search import NO_MATCH, MatchResult
from locale_index_of.search.context import HaystackContext
from locale_index_of.search.models import Grapheme


def iter_matches(context: HaystackContext, needle: str) -> Iterator[MatchResult]:
    """Yield every window equal to ``needle`` under the context's collation, in order.

    Windows may overlap. A needle with no considered graphemes yields nothing.
    The returned ``match`` joins the window's considered graphemes, so text
    skipped by the filter between them is not part of it.
    """
    width = len(context.considered(needle))
    if width == 0:
        return

    compare = context.comparator.compare
    window: deque[Grapheme] = deque()
    for grapheme in context.graphemes:
        window.append(grapheme)
        if len(window) < width:
            continue

        candidate = "".join(item.text for item in window)
        if compare(candidate, needle) == 0:
            yield MatchResult(index=window[0].offset, match=candidate)
        window.popleft()


def find_first(context: HaystackContext, needle: str) -> MatchResult:
    """Return the first match of ``needle`` or ``NO_MATCH``."""
    return next(iter_matches(context, needle), NO_MATCH)


def find_all(context: HaystackContext, needles: Sequence[str]) -> list[MatchResult | None]:
    """Search each needle independently against one context.

    Results keep the order of ``needles``; a needle without a match gets ``None``.
    """
    results: list[MatchResult | None] = []
    for needle in needles:
        result = find_first(context, needle)
        results.append(result if result.found else None)
    return results
