# tests/conftest.py
"""Shared fixtures: clean env for config/log lookups and sample dashboard records."""

from __future__ import annotations

import pytest

from fuzzy_record_search.matching import reload_presets
from fuzzy_record_search.utils import clear_config_cache, reload_topics


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Does: Drop env overrides so the packaged data dir and silent tracing are used."""
    for var in ("FUZZY_SEARCH_DATA_DIR", "DATA_DIR", "FUZZY_SEARCH_DEBUG_TOPICS"):
        monkeypatch.delenv(var, raising=False)
    reload_topics()
    clear_config_cache()
    reload_presets()
    yield
    monkeypatch.undo()
    reload_topics()
    clear_config_cache()
    reload_presets()


@pytest.fixture
def products() -> list[dict]:
    return [
        {
            "name": "Coca Cola 330ml",
            "code": "CC-330",
            "brand": {"name": "Coca Cola"},
            "category": {"name": "Soft Drinks"},
        },
        {
            "name": "Johnnie Walker Black",
            "code": "JW-BLK",
            "brand": {"name": "Diageo"},
            "category": {"name": "Whisky"},
        },
        {
            "name": "Pepsi Max",
            "code": "PP-MAX",
            "brand": None,
            "category": {"name": "Soft Drinks"},
        },
    ]


@pytest.fixture
def customers() -> list[dict]:
    return [
        {"name": "John Smith", "email": "john@smith.io", "phone": "555-0101", "address": "Rua A"},
        {"name": "Silva John", "email": "sj@mail.com", "phone": "555-0202", "address": "Rua B"},
        {"name": "Maria Costa", "email": "maria@costa.pt", "phone": "555-0303", "address": None},
    ]
