# src/fuzzy_record_search/matching/__init__.py
"""
matching.

Does: Facade exposing the record matching engine: edit distance, field path
resolution, similarity cascade, matcher, and pre-configured entity searches.

Returns: Public API for scoring a query against values and filtering/ranking records.
Used by: Dashboard list screens and the CLI.
"""

from __future__ import annotations

# ── Core ─────────────────────────────────────────────────────────────────────
from .edit_distance import edit_distance
from .field_resolver import (
    FieldPath,
    parse_field_path,
    resolve,
)

# ── Matcher ──────────────────────────────────────────────────────────────────
from .matcher import (
    DEFAULT_THRESHOLD,
    TIE_EPSILON,
    EmptyFieldPathsError,
    rank,
    search,
)

# ── Presets ──────────────────────────────────────────────────────────────────
from .presets import (
    SearchPreset,
    UnknownPresetError,
    get_preset,
    list_presets,
    reload_presets,
    search_customers,
    search_preset,
    search_products,
    search_purchases,
    search_suppliers,
)

# ── Scoring ──────────────────────────────────────────────────────────────────
from .scoring import (
    WORD_SHORT_CIRCUIT,
    normalize_text,
    score,
    tokenize,
    word_overlap_score,
)

__all__ = [
    # Core
    "edit_distance",
    "FieldPath",
    "parse_field_path",
    "resolve",
    # Scoring
    "score",
    "normalize_text",
    "tokenize",
    "word_overlap_score",
    "WORD_SHORT_CIRCUIT",
    # Matcher
    "search",
    "rank",
    "EmptyFieldPathsError",
    "DEFAULT_THRESHOLD",
    "TIE_EPSILON",
    # Presets
    "SearchPreset",
    "UnknownPresetError",
    "get_preset",
    "list_presets",
    "reload_presets",
    "search_preset",
    "search_products",
    "search_customers",
    "search_suppliers",
    "search_purchases",
]

__docformat__ = "google"
