"""
fuzzy_record_search
===================

Does: Root package initializer for the approximate record search engine.
Returns: Re-exports the most used entry points (`search`, `score`, presets).
Used by: All higher-level imports starting from `fuzzy_record_search.*`.
"""

from .matching import (
    EmptyFieldPathsError,
    get_preset,
    rank,
    score,
    search,
    search_preset,
)

__all__: list[str] = [
    "search",
    "rank",
    "score",
    "search_preset",
    "get_preset",
    "EmptyFieldPathsError",
]
__docformat__ = "google"
