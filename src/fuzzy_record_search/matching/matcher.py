# src/fuzzy_record_search/matching/matcher.py
from __future__ import annotations

"""
matcher.py

Does: Filter and rank a collection of records against a free-text query:
      best field score per record, inclusive threshold, stable descending sort
      where scores closer than a small epsilon count as ties.
Returns: search() -> records only; rank() -> (record, score) pairs.
Used by: Presets, the CLI, and any caller filtering already-fetched records.
"""

import logging
from functools import cmp_to_key
from typing import Any, List, Sequence, Tuple, Union

from fuzzy_record_search.utils.log import debug, is_enabled

from .field_resolver import FieldPath, parse_field_path, resolve
from .scoring import WORD_SHORT_CIRCUIT, score

__all__ = [
    "DEFAULT_THRESHOLD",
    "TIE_EPSILON",
    "EmptyFieldPathsError",
    "rank",
    "search",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_THRESHOLD = 0.4
TIE_EPSILON = 0.01  # scores closer than this keep their input order

Ranked = Tuple[Any, float]


class EmptyFieldPathsError(ValueError):
    """Raise when search is asked to match against no fields at all."""


def _is_blank(query: Any) -> bool:
    return not isinstance(query, str) or not query.strip()


def _normalize_paths(field_paths: Union[FieldPath, Sequence[FieldPath]]) -> List[Tuple[str, ...]]:
    """
    Does: Accept a single dotted path or a sequence of paths.
    Returns: Parsed paths; raises EmptyFieldPathsError when there are none.
    """
    if isinstance(field_paths, str):
        field_paths = [field_paths]
    paths = [parse_field_path(p) for p in field_paths]
    if not paths:
        raise EmptyFieldPathsError("search() needs at least one field path")
    return paths


def _best_score(
    record: Any,
    query: str,
    paths: Sequence[Tuple[str, ...]],
    word_short_circuit: float,
) -> float:
    best = 0.0
    for path in paths:
        s = score(query, resolve(record, path), word_short_circuit=word_short_circuit)
        if s > best:
            best = s
            if best >= 1.0:
                break
    return best


def rank(
    records: Sequence[Any],
    query: str,
    field_paths: Union[FieldPath, Sequence[FieldPath]],
    threshold: float = DEFAULT_THRESHOLD,
    *,
    tie_epsilon: float = TIE_EPSILON,
    word_short_circuit: float = WORD_SHORT_CIRCUIT,
) -> List[Ranked]:
    """
    Does: Score every record (max over field paths), keep score ≥ threshold,
          sort descending with near-ties (|Δ| < tie_epsilon) left in input order.
          A blank query keeps every record in order, each scored 1.0.
    Returns: List of (record, score) pairs.
    """
    paths = _normalize_paths(field_paths)

    if _is_blank(query):
        return [(record, 1.0) for record in records]

    trace = is_enabled("search")
    kept: List[Ranked] = []
    for idx, record in enumerate(records):
        best = _best_score(record, query, paths, word_short_circuit)
        if trace:
            debug(f"#{idx} score={best:.3f} keep={best >= threshold}", topic="search")
        if best >= threshold:
            kept.append((record, best))

    def _compare(a: Ranked, b: Ranked) -> int:
        if abs(a[1] - b[1]) < tie_epsilon:
            return 0
        return -1 if a[1] > b[1] else 1

    # list.sort is stable, so comparator ties preserve input order
    kept.sort(key=cmp_to_key(_compare))

    log.debug(
        "search %r over %d record(s), %d field(s): %d kept (threshold=%.2f)",
        query, len(records), len(paths), len(kept), threshold,
    )
    return kept


def search(
    records: Sequence[Any],
    query: str,
    field_paths: Union[FieldPath, Sequence[FieldPath]],
    threshold: float = DEFAULT_THRESHOLD,
    *,
    tie_epsilon: float = TIE_EPSILON,
    word_short_circuit: float = WORD_SHORT_CIRCUIT,
) -> List[Any]:
    """
    Does: Filter `records` to those matching `query` on any of `field_paths`,
          best matches first. Records are never copied or mutated.
          A blank query returns `records` itself (or a list of it, for non-lists).
    Returns: List of records.
    """
    if _is_blank(query):
        _normalize_paths(field_paths)
        return records if isinstance(records, list) else list(records)

    ranked = rank(
        records,
        query,
        field_paths,
        threshold,
        tie_epsilon=tie_epsilon,
        word_short_circuit=word_short_circuit,
    )
    return [record for record, _ in ranked]
