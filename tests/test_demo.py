# tests/test_demo.py
from __future__ import annotations

import io
import json
import os

import pytest

from fuzzy_record_search import demo
from fuzzy_record_search.utils import is_enabled, reload_topics


@pytest.fixture
def records_file(tmp_path, products):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(products), encoding="utf-8")
    return path


def _run(capsys, argv):
    code = demo.main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_cli_preset_search(capsys, records_file):
    code, out, _ = _run(capsys, ["coca", "--file", str(records_file), "--preset", "products"])
    assert code == 0
    assert [r["code"] for r in json.loads(out)] == ["CC-330"]


def test_cli_field_search_with_scores(capsys, records_file):
    code, out, _ = _run(
        capsys,
        ["whisky", "-f", str(records_file), "--field", "category.name", "--with-scores"],
    )
    assert code == 0
    [hit] = json.loads(out)
    assert hit["score"] == 1.0
    assert hit["record"]["code"] == "JW-BLK"


def test_cli_threshold_override(capsys, records_file):
    code, out, _ = _run(
        capsys,
        ["pepsy", "-f", str(records_file), "--field", "name", "--threshold", "0.95"],
    )
    assert code == 0
    assert json.loads(out) == []


def test_cli_blank_query_returns_everything(capsys, records_file, products):
    code, out, _ = _run(capsys, [" ", "-f", str(records_file), "--preset", "products"])
    assert code == 0
    assert json.loads(out) == products


def test_cli_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps([{"name": "Pepsi"}])))
    code, out, _ = _run(capsys, ["pepsy", "--field", "name"])
    assert code == 0
    assert json.loads(out) == [{"name": "Pepsi"}]


@pytest.mark.parametrize(
    "argv, message",
    [
        (["x", "--preset", "invoices"], "invoices"),
        (["x", "-f", "does-not-exist.json", "--field", "name"], "does-not-exist.json"),
    ],
)
def test_cli_errors_exit_1(capsys, records_file, argv, message):
    if "--preset" in argv:
        argv = argv + ["-f", str(records_file)]
    code, out, err = _run(capsys, argv)
    assert code == 1
    assert out == ""
    assert err.startswith("Error:")
    assert message in err


def test_cli_rejects_non_array(capsys, tmp_path):
    path = tmp_path / "obj.json"
    path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
    code, _, err = _run(capsys, ["x", "-f", str(path), "--field", "name"])
    assert code == 1
    assert "JSON array" in err


def test_cli_requires_preset_or_field(capsys):
    with pytest.raises(SystemExit):
        demo.main(["x"])


def test_cli_debug_enables_traces(capsys, monkeypatch, records_file):
    monkeypatch.setenv("FUZZY_SEARCH_DEBUG_TOPICS", "")
    code, _, err = _run(capsys, ["coca", "-f", str(records_file), "--field", "name", "--debug"])
    assert code == 0
    assert "[search][DEBUG]" in err


def test_cli_debug_restores_topics_afterwards(capsys, monkeypatch, records_file):
    monkeypatch.setenv("FUZZY_SEARCH_DEBUG_TOPICS", "presets")
    reload_topics()
    _run(capsys, ["coca", "-f", str(records_file), "--field", "name", "--debug"])
    assert os.environ["FUZZY_SEARCH_DEBUG_TOPICS"] == "presets"
    assert is_enabled("presets")
    assert not is_enabled("search")


def test_cli_debug_unsets_topics_it_added(capsys, records_file):
    assert "FUZZY_SEARCH_DEBUG_TOPICS" not in os.environ
    _run(capsys, ["coca", "-f", str(records_file), "--field", "name", "--debug"])
    assert "FUZZY_SEARCH_DEBUG_TOPICS" not in os.environ
    assert not is_enabled("search")
