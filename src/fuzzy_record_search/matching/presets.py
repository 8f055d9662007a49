# src/fuzzy_record_search/matching/presets.py
from __future__ import annotations

"""
presets.py

Does: Named, pre-configured searches (fields + threshold) for the dashboard's
      entity lists: products, customers, suppliers, purchases.
Returns: get_preset/list_presets/search_preset and per-entity shortcuts.
Used by: List screens filtering fetched records, and the CLI (--preset).
"""

from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from fuzzy_record_search.utils.load_config import (
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
)
from fuzzy_record_search.utils.log import debug

from .matcher import DEFAULT_THRESHOLD, search

__all__ = [
    "PRESETS_FILE",
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

PRESETS_FILE = "search_presets"


class SearchPreset(NamedTuple):
    name: str
    fields: Tuple[str, ...]
    threshold: float = DEFAULT_THRESHOLD


class UnknownPresetError(KeyError):
    """Raise when a preset name is not defined in the presets file."""


# ─────────────────────────────────────────────────────────────────────────────
# Cached config
# ─────────────────────────────────────────────────────────────────────────────

# (raw payload, presets built from it); rebuilt when load_config hands back a new object
_BUILT: Optional[Tuple[Any, Dict[str, SearchPreset]]] = None


def _validate_presets(data: Dict[str, Any]) -> None:
    """
    Does: Check every entry has a non-empty list of string fields and,
          if given, a numeric threshold in [0, 1].
    """
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise ValueError(f"preset {name!r} must be an object")
        fields = entry.get("fields")
        if not isinstance(fields, list) or not fields:
            raise ValueError(f"preset {name!r} needs a non-empty 'fields' list")
        if not all(isinstance(f, str) and f for f in fields):
            raise ValueError(f"preset {name!r} has a non-string field path")
        threshold = entry.get("threshold", DEFAULT_THRESHOLD)
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ValueError(f"preset {name!r} threshold must be a number")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"preset {name!r} threshold out of range: {threshold}")


def _get_presets() -> Dict[str, SearchPreset]:
    """
    Does: Load preset definitions through the mtime-keyed config cache and
          build SearchPreset objects once per loaded payload.
    Returns: Mapping of preset name → SearchPreset.
    """
    global _BUILT
    raw = load_config(PRESETS_FILE)
    if _BUILT is not None and _BUILT[0] is raw:
        return _BUILT[1]

    if not isinstance(raw, dict):
        raise ConfigTypeError(
            f"{PRESETS_FILE}.json must contain a JSON object, got {type(raw).__name__}"
        )
    try:
        _validate_presets(raw)
    except ValueError as e:
        raise ConfigParseError(f"Invalid presets in {PRESETS_FILE}.json: {e}") from e

    presets = {
        name: SearchPreset(
            name=name,
            fields=tuple(entry["fields"]),
            threshold=float(entry.get("threshold", DEFAULT_THRESHOLD)),
        )
        for name, entry in raw.items()
    }
    debug(f"loaded presets: {sorted(presets)}", topic="presets")
    _BUILT = (raw, presets)
    return presets


def reload_presets() -> None:
    """Does: Drop cached presets so the next lookup re-reads the file."""
    global _BUILT
    _BUILT = None
    clear_config_cache()


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def list_presets() -> List[str]:
    return sorted(_get_presets())


def get_preset(name: str) -> SearchPreset:
    """
    Does: Look up a preset by name.
    Returns: SearchPreset; raises UnknownPresetError if not defined.
    """
    presets = _get_presets()
    try:
        return presets[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown search preset {name!r} (known: {', '.join(sorted(presets))})"
        ) from None


def search_preset(name: str, records: Sequence[Any], query: str) -> List[Any]:
    """Does: Run search() with the fields and threshold of preset `name`."""
    preset = get_preset(name)
    return search(records, query, preset.fields, preset.threshold)


def search_products(products: Sequence[Any], query: str) -> List[Any]:
    """Does: Match on name, code, brand.name and category.name."""
    return search_preset("products", products, query)


def search_customers(customers: Sequence[Any], query: str) -> List[Any]:
    return search_preset("customers", customers, query)


def search_suppliers(suppliers: Sequence[Any], query: str) -> List[Any]:
    return search_preset("suppliers", suppliers, query)


def search_purchases(purchases: Sequence[Any], query: str) -> List[Any]:
    return search_preset("purchases", purchases, query)
