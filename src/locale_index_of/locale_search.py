"""Public entry points for locale-aware substring search.

LocaleSearch is the composition root: it binds one collation capability
(ICU unless another is injected) and settings. The module-level functions
below share one default instance, so settings are read once per process;
an injected capability is bound to those same settings.

Example:
    >>> finder = make_search(IcuCollation())
    >>> finder("here is ä for you", "a", "en", {"sensitivity": "base"})
    MatchResult(index=8, match='ä')
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from functools import lru_cache
import logging
from typing import Any

from locale_index_of.config import Settings
from locale_index_of.domain.search import CollationOptions, MatchResult
from locale_index_of.observability.metrics import CONTEXT_BUILD_LATENCY, record_search, track_latency
from locale_index_of.observability.tracing import create_span
from locale_index_of.search import matcher
from locale_index_of.search.context import HaystackContext, build_context
from locale_index_of.search.icu_collation import IcuCollation
from locale_index_of.search.protocols import CollationCapability, Comparator, LocaleRequest


logger = logging.getLogger(__name__)

OptionsInput = CollationOptions | Mapping[str, Any] | None
SearchFunction = Callable[..., MatchResult]


class LocaleSearch:
    """Locale-aware search bound to one collation capability."""

    def __init__(
        self,
        capability: CollationCapability | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.capability = capability if capability is not None else IcuCollation(self.settings)

    def build_context(
        self,
        haystack: str,
        locales: LocaleRequest | Comparator = None,
        options: OptionsInput = None,
    ) -> HaystackContext:
        """Segment and filter ``haystack`` once for any number of searches."""
        with create_span("locale_index_of.build_context", attributes={"haystack.length": len(haystack)}) as span:
            with track_latency(CONTEXT_BUILD_LATENCY, segmenter=self.settings.segmenter):
                context = build_context(
                    self.capability,
                    haystack,
                    locales,
                    options,
                    segmenter_preference=self.settings.segmenter,
                )
            span.set_attribute("collation.locale", context.comparator.resolved_options().locale)
            span.set_attribute("graphemes.considered", len(context.graphemes))
        return context

    def search(
        self,
        haystack: str,
        needle: str,
        locales: LocaleRequest | Comparator = None,
        options: OptionsInput = None,
    ) -> MatchResult:
        """Return the first locale-equal occurrence of ``needle``, or ``NO_MATCH``."""
        context = self.build_context(haystack, locales, options)
        result = matcher.find_first(context, needle)
        record_search(result.found)
        return result

    def iter_matches(
        self,
        haystack: str,
        needle: str,
        locales: LocaleRequest | Comparator = None,
        options: OptionsInput = None,
    ) -> Iterator[MatchResult]:
        """Lazily yield every occurrence of ``needle``, overlapping ones included."""
        return matcher.iter_matches(self.build_context(haystack, locales, options), needle)

    def find_all(self, context: HaystackContext, needles: Sequence[str]) -> list[MatchResult | None]:
        """First match per needle against a shared context; ``None`` where absent."""
        with create_span("locale_index_of.find_all", attributes={"needles.count": len(needles)}):
            results = matcher.find_all(context, needles)
        for result in results:
            record_search(result is not None)
        logger.debug("Searched %d needles, %d matched", len(results), sum(r is not None for r in results))
        return results


@lru_cache(maxsize=1)
def get_default_search() -> LocaleSearch:
    """ICU-backed LocaleSearch shared by the module-level functions."""
    return LocaleSearch()


def _bind(capability: CollationCapability | None) -> LocaleSearch:
    default = get_default_search()
    if capability is None:
        return default
    return LocaleSearch(capability, default.settings)


def make_search(capability: CollationCapability | None = None, settings: Settings | None = None) -> SearchFunction:
    """Bind a collation capability once and return a reusable search function.

    The returned callable takes ``(haystack, needle, locales=None, options=None)``.
    """
    return LocaleSearch(capability, settings).search


def search(
    haystack: str,
    needle: str,
    locales: LocaleRequest | Comparator = None,
    options: OptionsInput = None,
    *,
    capability: CollationCapability | None = None,
) -> MatchResult:
    """One-shot search. Never raises for "not found"; returns ``NO_MATCH`` instead."""
    return _bind(capability).search(haystack, needle, locales, options)


def index_of(
    comparator: Comparator,
    haystack: str,
    needle: str,
    options: OptionsInput = None,
    *,
    capability: CollationCapability | None = None,
) -> MatchResult:
    """Search with a pre-built comparator; only ``ignore_numbers`` is read from options."""
    return _bind(capability).search(haystack, needle, comparator, options)


def build_haystack_context(
    haystack: str,
    locales: LocaleRequest | Comparator = None,
    options: OptionsInput = None,
    *,
    capability: CollationCapability | None = None,
) -> HaystackContext:
    return _bind(capability).build_context(haystack, locales, options)


def find_all(context: HaystackContext, needles: Sequence[str]) -> list[MatchResult | None]:
    """Search several needles against one prebuilt context, preserving order."""
    return get_default_search().find_all(context, needles)
