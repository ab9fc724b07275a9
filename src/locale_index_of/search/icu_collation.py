"""ICU-backed collation capability (PyICU).

Builds search-usage collators and grapheme break iterators for a requested
locale. Collators are configured once and only read afterwards, so one
IcuComparator can serve concurrent searches. Break iterators are stateful
and are therefore created per ``segment()`` call.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
import logging

import icu

from locale_index_of.config import Settings
from locale_index_of.domain.search import CollationOptions, ResolvedCollation, Sensitivity
from locale_index_of.errors import ConfigurationError
from locale_index_of.search.models import Grapheme
from locale_index_of.search.protocols import LocaleRequest


logger = logging.getLogger(__name__)

_STRENGTHS: dict[str, int] = {
    "base": icu.Collator.PRIMARY,
    "accent": icu.Collator.SECONDARY,
    "case": icu.Collator.PRIMARY,
    "variant": icu.Collator.TERTIARY,
}

_CASE_FIRST: dict[str, int] = {
    "upper": icu.UCollAttributeValue.UPPER_FIRST,
    "lower": icu.UCollAttributeValue.LOWER_FIRST,
    "false": icu.UCollAttributeValue.OFF,
}

_ALTERNATE: dict[bool, int] = {
    True: icu.UCollAttributeValue.SHIFTED,
    False: icu.UCollAttributeValue.NON_IGNORABLE,
}

_ROOT_LANGUAGE = "und"


@lru_cache(maxsize=1)
def _collation_languages() -> frozenset[str]:
    """Languages ICU ships collation data for."""
    return frozenset(icu.Locale(str(entry)).getLanguage() for entry in icu.Collator.getAvailableLocales())


def parse_locale_tag(tag: str) -> icu.Locale:
    """Parse a BCP 47 tag (underscores tolerated) into an ICU locale.

    ``und`` is the root locale: valid, with an empty language.
    """
    if not isinstance(tag, str) or not tag.strip():
        raise ConfigurationError(f"Invalid locale tag: {tag!r}")
    normalized = tag.strip().replace("_", "-")
    try:
        locale = icu.Locale.forLanguageTag(normalized)
    except icu.ICUError as exc:
        raise ConfigurationError(f"Invalid locale tag: {tag!r}") from exc
    if not locale.getLanguage() and normalized.split("-")[0].lower() != _ROOT_LANGUAGE:
        raise ConfigurationError(f"Invalid locale tag: {tag!r}")
    return locale


class IcuComparator:
    """Search-usage ICU collator with the requested sensitivity applied."""

    def __init__(self, locale: icu.Locale, options: CollationOptions) -> None:
        self._locale_tag = locale.toLanguageTag()
        self._sensitivity: Sensitivity = options.sensitivity or "variant"

        search_locale = icu.Locale(f"{locale.getBaseName()}@collation=search")
        try:
            collator = icu.Collator.createInstance(search_locale)
        except icu.ICUError as exc:
            raise ConfigurationError(f"No collator available for {self._locale_tag}") from exc

        collator.setStrength(_STRENGTHS[self._sensitivity])
        collator.setAttribute(icu.UCollAttribute.NORMALIZATION_MODE, icu.UCollAttributeValue.ON)
        if self._sensitivity == "case":
            collator.setAttribute(icu.UCollAttribute.CASE_LEVEL, icu.UCollAttributeValue.ON)
        if options.ignore_punctuation is not None:
            alternate = _ALTERNATE[options.ignore_punctuation]
            collator.setAttribute(icu.UCollAttribute.ALTERNATE_HANDLING, alternate)
        # Unset means the locale's tailoring decides (Thai shifts punctuation)
        self._ignore_punctuation = (
            collator.getAttribute(icu.UCollAttribute.ALTERNATE_HANDLING) == icu.UCollAttributeValue.SHIFTED
        )
        if options.numeric:
            collator.setAttribute(icu.UCollAttribute.NUMERIC_COLLATION, icu.UCollAttributeValue.ON)
        if options.case_first is not None:
            collator.setAttribute(icu.UCollAttribute.CASE_FIRST, _CASE_FIRST[options.case_first])
        self._collator = collator

    def compare(self, left: str, right: str) -> int:
        result = self._collator.compare(left, right)
        return (result > 0) - (result < 0)

    def resolved_options(self) -> ResolvedCollation:
        return ResolvedCollation(
            locale=self._locale_tag,
            sensitivity=self._sensitivity,
            ignore_punctuation=self._ignore_punctuation,
        )

    def __repr__(self) -> str:
        return f"IcuComparator(locale={self._locale_tag!r}, sensitivity={self._sensitivity!r})"


class IcuGraphemeSegmenter:
    """Extended grapheme cluster segmentation through ICU's character break iterator.

    ICU reports boundaries in UTF-16 units; offsets are re-based onto Python
    string indices by accumulating cluster lengths.
    """

    def __init__(self, locale: str) -> None:
        self.locale = locale
        self._icu_locale = parse_locale_tag(locale)

    def segment(self, text: str) -> Iterator[Grapheme]:
        if not text:
            return

        source = icu.UnicodeString(text)
        breaker = icu.BreakIterator.createCharacterInstance(self._icu_locale)
        breaker.setText(source)

        start = breaker.first()
        offset = 0
        for end in breaker:
            cluster = str(source[start:end])
            yield Grapheme(offset=offset, text=cluster)
            offset += len(cluster)
            start = end

    def __repr__(self) -> str:
        return f"IcuGraphemeSegmenter(locale={self.locale!r})"


class IcuCollation:
    """CollationCapability backed by PyICU."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def resolve_locale(self, locales: LocaleRequest) -> icu.Locale:
        """Return the first requested locale ICU has collation data for.

        Every requested tag is validated, even those after the chosen one.
        The root locale (``und``) always has collation data. Falls back to
        the configured default, then to ICU's default locale.
        """
        requested = [locales] if isinstance(locales, str) else list(locales or [])
        if not requested:
            requested = self.settings.get_default_locales()

        parsed = [parse_locale_tag(tag) for tag in requested]
        supported = _collation_languages()
        for locale in parsed:
            language = locale.getLanguage()
            if not language or language in supported:
                return locale

        if parsed:
            logger.debug("No collation data for %s; using ICU default locale", requested)
        return icu.Locale.getDefault()

    def create_comparator(self, locales: LocaleRequest, options: CollationOptions) -> IcuComparator:
        return IcuComparator(self.resolve_locale(locales), options)

    def create_segmenter(self, locale: str) -> IcuGraphemeSegmenter:
        return IcuGraphemeSegmenter(locale)
