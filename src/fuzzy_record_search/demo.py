# src/fuzzy_record_search/demo.py
import argparse
import json
import logging
import os
import sys


def _read_records(path):
    """Load a JSON array of records from `path` ('-' reads stdin)."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array of records, got {type(data).__name__}")
    return data


def build_parser():
    parser = argparse.ArgumentParser(
        prog="frs-search",
        description="Filter and rank JSON records by an approximate text query.",
    )
    parser.add_argument("query", help="Free-text query (e.g. 'john silva')")
    parser.add_argument(
        "--file",
        "-f",
        default="-",
        help="JSON file holding an array of records ('-' for stdin)",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--preset",
        help="Named search preset (products, customers, suppliers, purchases)",
    )
    target.add_argument(
        "--field",
        action="append",
        dest="fields",
        help="Dotted field path to match on; repeatable (e.g. --field brand.name)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Minimum score to keep a record (default 0.4, or the preset's)",
    )
    parser.add_argument(
        "--with-scores",
        action="store_true",
        dest="with_scores",
        help="Emit {score, record} pairs instead of bare records",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: read records, run a preset or field search, print matches as JSON."""
    from .utils import reload_topics

    args = build_parser().parse_args(argv)

    if not args.debug:
        return _run(args)

    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    old_topics = os.environ.get("FUZZY_SEARCH_DEBUG_TOPICS")
    os.environ["FUZZY_SEARCH_DEBUG_TOPICS"] = "all"
    reload_topics()
    try:
        return _run(args)
    finally:
        if old_topics is None:
            os.environ.pop("FUZZY_SEARCH_DEBUG_TOPICS", None)
        else:
            os.environ["FUZZY_SEARCH_DEBUG_TOPICS"] = old_topics
        reload_topics()


def _run(args):
    from .matching import DEFAULT_THRESHOLD, get_preset, rank

    try:
        records = _read_records(args.file)
        if args.preset:
            preset = get_preset(args.preset)
            fields, threshold = preset.fields, preset.threshold
        else:
            fields, threshold = args.fields, DEFAULT_THRESHOLD
        if args.threshold is not None:
            threshold = args.threshold

        ranked = rank(records, args.query, fields, threshold)
        if args.with_scores:
            out = [{"score": round(s, 4), "record": r} for r, s in ranked]
        else:
            out = [r for r, _ in ranked]
        print(json.dumps(out, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
