# src/fuzzy_record_search/matching/edit_distance.py
from __future__ import annotations

"""
edit_distance.py

Does: Classic Levenshtein distance (unit-cost insert/delete/substitute)
      between two already-normalized strings.
Returns: Non-negative int; edit_distance("", s) == len(s), edit_distance(s, s) == 0.
Used by: The character-level fallback channel of the similarity scorer.
"""

from rapidfuzz.distance import Levenshtein

__all__ = ["edit_distance"]

__docformat__ = "google"


def edit_distance(a: str, b: str) -> int:
    """
    Does: Minimum number of single-character edits turning `a` into `b`.
          No normalization happens here; callers case-fold and trim first.
    Returns: Integer distance.
    """
    return Levenshtein.distance(a, b)
