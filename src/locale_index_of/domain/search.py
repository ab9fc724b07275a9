"""Domain models for locale-aware substring search.

Following Cosmic Python principles:
- Value Objects are immutable (frozen=True)
- No infrastructure dependencies (ICU lives in the search package)

CollationOptions describes what a caller asks for, ResolvedCollation what a
comparator actually applies, and MatchResult what a search reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from locale_index_of.errors import ConfigurationError


Sensitivity = Literal["base", "accent", "case", "variant"]
CaseFirst = Literal["upper", "lower", "false"]

# Comparator option keys the caller may not override
_FIXED_KEYS = ("usage",)


class CollationOptions(BaseModel):
    """Value object holding per-search collation and filtering options.

    Accepts both snake_case and camelCase keys. ``ignore_numbers`` is a filter
    option; every other field configures the comparator. ``None`` leaves a
    setting at the locale's default.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    sensitivity: Sensitivity | None = None
    ignore_punctuation: bool | None = Field(default=None, alias="ignorePunctuation")
    ignore_numbers: bool = Field(default=False, alias="ignoreNumbers")
    numeric: bool = False
    case_first: CaseFirst | None = Field(default=None, alias="caseFirst")

    @classmethod
    def coerce(cls, options: CollationOptions | Mapping[str, Any] | None) -> CollationOptions:
        """Build options from a mapping, raising ConfigurationError on bad input."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ConfigurationError(f"Collation options must be a mapping, got {type(options).__name__}")

        data = {key: value for key, value in options.items() if key not in _FIXED_KEYS}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid collation options: {exc}") from exc


class ResolvedCollation(BaseModel):
    """Value object describing the collation a comparator actually applies."""

    model_config = ConfigDict(frozen=True)

    locale: str
    sensitivity: Sensitivity = "variant"
    ignore_punctuation: bool = False


class MatchResult(BaseModel):
    """Value object for the outcome of one search.

    ``index`` is the offset of the match in the original haystack and
    ``match`` the matched text. ``index == -1`` pairs with ``match is None``
    and nothing else does; use ``NO_MATCH`` for the not-found case.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=-1)
    match: str | None = None

    @model_validator(mode="after")
    def _check_sentinel_pairing(self) -> MatchResult:
        if (self.index == -1) != (self.match is None):
            raise ValueError("index -1 must pair with match None, and only with it")
        return self

    @property
    def found(self) -> bool:
        return self.match is not None

    def __bool__(self) -> bool:
        return self.found


NO_MATCH = MatchResult(index=-1, match=None)
