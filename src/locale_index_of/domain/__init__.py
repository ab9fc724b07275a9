"""Domain layer - value objects shared by the search core and its callers.

Key principles:
1. No dependencies on ICU or observability
2. Type safety with Pydantic
3. Immutability (value objects)
"""

from locale_index_of.domain.search import (
    NO_MATCH,
    CaseFirst,
    CollationOptions,
    MatchResult,
    ResolvedCollation,
    Sensitivity,
)


__all__ = [
    "NO_MATCH",
    "CaseFirst",
    "CollationOptions",
    "MatchResult",
    "ResolvedCollation",
    "Sensitivity",
]
