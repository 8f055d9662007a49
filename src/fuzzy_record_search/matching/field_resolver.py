# src/fuzzy_record_search/matching/field_resolver.py
from __future__ import annotations

"""
field_resolver.py

Does: Read a value out of a (possibly nested) record via a dotted field path,
      tolerating missing keys, None intermediates and non-mapping intermediates.
Returns: parse_field_path() -> tuple of segments; resolve() -> value or None.
Used by: The matcher, once per (record, field path) pair.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Tuple, Union

__all__ = [
    "FieldPath",
    "parse_field_path",
    "resolve",
]

__docformat__ = "google"

FieldPath = Union[str, Sequence[str]]


def parse_field_path(path: FieldPath) -> Tuple[str, ...]:
    """
    Does: Split "brand.name" into ("brand", "name"); pass segment sequences through.
    Returns: Tuple of string segments.
    """
    if isinstance(path, str):
        return tuple(path.split("."))
    return tuple(str(seg) for seg in path)


def resolve(record: Any, path: FieldPath) -> Optional[Any]:
    """
    Does: Walk `path` segment by segment. Stops at the first non-mapping value
          or absent key. The terminal value is returned as-is (no coercion).
    Returns: Resolved value, or None when the path cannot be fully resolved.
    """
    current = record
    for segment in parse_field_path(path):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current
