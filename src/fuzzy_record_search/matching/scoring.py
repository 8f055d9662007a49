# src/fuzzy_record_search/matching/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Similarity between a free-text query and one field value, evaluated as a
      priority cascade: exact → substring → token overlap → edit distance.
      The first applicable rule wins; the channels are never blended.
Returns: score() in [0,1] plus the normalization/tokenizing helpers it relies on.
Used by: The matcher (max over a record's field paths).
"""

import logging
from typing import Any, List, Optional, Sequence

from .edit_distance import edit_distance

__all__ = [
    "EXACT_SCORE",
    "SUBSTRING_SCORE",
    "WORD_SHORT_CIRCUIT",
    "normalize_text",
    "tokenize",
    "word_overlap_score",
    "score",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
EXACT_SCORE = 1.0
SUBSTRING_SCORE = 0.9
WORD_EXACT = 1.0           # query word equals a value word
WORD_PARTIAL = 0.7         # one word contains the other
WORD_CHANNEL_CAP = 0.8     # keeps the token channel below the substring channel
WORD_SHORT_CIRCUIT = 0.5   # token score strictly above this skips edit distance


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _as_text(value: Any) -> str:
    """
    Does: String form of a field value, rendered the way JSON-decoded values
          show up in the dashboard (true/false, 12 rather than 12.0).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_text(value: Any) -> str:
    """
    Does: Lower-case and trim the string form of `value`.
    Returns: Normalized string ("" for None).
    """
    if value is None:
        return ""
    return _as_text(value).lower().strip()


def tokenize(text: str) -> List[str]:
    """Does: Split on runs of whitespace, dropping empty words."""
    return text.split()


def word_overlap_score(q_words: Sequence[str], v_words: Sequence[str]) -> float:
    """
    Does: For each query word take the first value word that equals it (1.0)
          or contains / is contained by it (0.7); sum, divide by the longer
          word list, then cap the channel at 0.8.
    Returns: Score in [0, 0.8]; 0.0 when either side has no words.
    """
    if not q_words or not v_words:
        return 0.0

    matched = 0.0
    for qw in q_words:
        for vw in v_words:
            if qw == vw:
                matched += WORD_EXACT
                break
            if qw in vw or vw in qw:
                matched += WORD_PARTIAL
                break

    return matched / max(len(q_words), len(v_words)) * WORD_CHANNEL_CAP


# ─────────────────────────────────────────────────────────────────────────────
# Cascade
# ─────────────────────────────────────────────────────────────────────────────

def score(
    query: str,
    value: Optional[Any],
    *,
    word_short_circuit: float = WORD_SHORT_CIRCUIT,
) -> float:
    """
    Does: Score how well `query` matches `value`.
          1. absent value               → 0
          2. exact (case-insensitive)   → 1.0
          3. substring either way       → 0.9
          4. token overlap > cutoff     → overlap score
          5. otherwise                  → 1 - distance / longer length
    Returns: Float in [0, 1]. Never raises.
    """
    if value is None:
        return 0.0

    try:
        q = normalize_text(query)
        v = normalize_text(value)
    except Exception as e:
        log.debug("Unscorable value %r: %s", type(value).__name__, e)
        return 0.0

    if q == v:
        return EXACT_SCORE
    if q in v or v in q:
        return SUBSTRING_SCORE

    word_score = word_overlap_score(tokenize(q), tokenize(v))
    if word_score > word_short_circuit:
        return word_score

    # both-empty already returned 1.0 above, so max_len > 0
    max_len = max(len(q), len(v))
    return max(0.0, 1.0 - edit_distance(q, v) / max_len)
