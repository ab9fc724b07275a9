"""Error types raised while configuring locale-aware search."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a locale tag or collation option cannot be honoured.

    Raised while building a comparator or haystack context, before any
    matching runs. "Not found" is never reported through this error.
    """
