"""Filter policy deciding which graphemes count toward window alignment.

Punctuation is detected by probing the active comparator rather than a static
Unicode table, so it follows the locale's own notion of ignorable
characters. The probe also treats whitespace as punctuation; matches found
with ``ignore_punctuation`` therefore never include spaces.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import re
from typing import TYPE_CHECKING

from locale_index_of.search.models import Grapheme


if TYPE_CHECKING:
    from locale_index_of.search.protocols import Comparator

DIGIT_PATTERN = re.compile(r"\d")

_PROBE = "a"


class ConsideredFilter:
    """Decides, once per grapheme, whether it takes a window slot."""

    def __init__(self, comparator: Comparator, *, ignore_numbers: bool = False) -> None:
        self.comparator = comparator
        self.ignore_numbers = ignore_numbers
        self.ignore_punctuation = comparator.resolved_options().ignore_punctuation

    def is_considered(self, text: str) -> bool:
        if self.ignore_numbers and DIGIT_PATTERN.search(text):
            return False
        if self.ignore_punctuation and self.comparator.compare(_PROBE, _PROBE + text) == 0:
            return False
        return True

    def __call__(self, graphemes: Iterable[Grapheme]) -> Iterator[Grapheme]:
        for grapheme in graphemes:
            if self.is_considered(grapheme.text):
                yield grapheme

    def __repr__(self) -> str:
        return f"ConsideredFilter(ignore_numbers={self.ignore_numbers}, ignore_punctuation={self.ignore_punctuation})"
