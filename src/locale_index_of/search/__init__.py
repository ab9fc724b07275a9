"""
Grapheme-aware locale search core.

This package provides:
- protocols: Comparator, Segmenter and CollationCapability interfaces
- icu_collation: the PyICU-backed capability
- segmenters: naive fallback segmenter and segmenter selection
- filters: punctuation/digit filter policy
- context: haystack contexts built once per haystack
- matcher: the sliding-window matcher
"""
