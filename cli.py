"""Command-line entrypoint for pronunciation lookups and rhyme checks."""
from __future__ import annotations

import argparse
import json
import logging
from typing import Optional, Sequence

from config import FLAGS
from pronounce_core.errors import DictionaryError
from pronounce_core.index import PronouncingIndex
from pronounce_core.loader import load_dictionary
from pronounce_core.logging_utils import setup_logging
from pronounce_core.normalize import CASES, normalize_query
from pronounce_core.prosody import describe
from pronounce_core.rhymes import rhymes
from pronounce_core.rules import Rule
from pronounce_core.search import ORDERS, RhymeFinder

log = logging.getLogger(__name__)


def _rule_to_dict(rule: Rule) -> dict:
    return {
        "label": rule.label,
        "pronunciation": list(rule.phones()),
        "monosyllabic": rule.is_monosyllabic,
        "prosody": describe(rule),
    }


def _cmd_lookup(index: PronouncingIndex, args: argparse.Namespace) -> int:
    found = {word: index.lookup(word) for word in args.words}
    if args.json:
        print(json.dumps({w: [_rule_to_dict(r) for r in rules] for w, rules in found.items()}, indent=2))
    else:
        for word, rules in found.items():
            if not rules:
                print(f"{word:<20} (not found)")
            for rule in rules:
                print(f"{rule.label:<20} {' '.join(rule.phones()):<30} {describe(rule)}")
    return 0 if all(found.values()) else 1


def _cmd_rhymes(index: PronouncingIndex, args: argparse.Namespace) -> int:
    a, b = index.lookup(args.first), index.lookup(args.second)
    result = rhymes(a, b)
    if args.json:
        print(json.dumps({"first": args.first, "second": args.second, "rhymes": result}))
    else:
        for word, rules in ((args.first, a), (args.second, b)):
            if not rules:
                log.warning("%s is not in the dictionary", word)
        print("yes" if result else "no")
    return 0 if result else 1


def _cmd_find(index: PronouncingIndex, args: argparse.Namespace) -> int:
    words = RhymeFinder(index).find(args.word, limit=args.top, order=args.order)
    if args.json:
        print(json.dumps(words, indent=2))
    else:
        for word in words:
            print(word)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up CMU pronunciations and check rhymes")
    parser.add_argument("--dict", dest="dict_path", default=None,
                        help="Path to a CMU dictionary file (default: $CMUDICT_PATH)")
    parser.add_argument("--case", choices=CASES, default=FLAGS.get("QUERY_CASE", "lower"),
                        help="Case folding applied to query words")
    parser.add_argument("--no-fallback", action="store_true",
                        help="Fail instead of using the built-in dictionary when the file is missing")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    p_lookup = sub.add_parser("lookup", help="Print every pronunciation of each word")
    p_lookup.add_argument("words", nargs="+")
    p_lookup.set_defaults(func=_cmd_lookup, query_fields=("words",))

    p_rhymes = sub.add_parser("rhymes", help="Exit 0 if the two words rhyme, 1 otherwise")
    p_rhymes.add_argument("first")
    p_rhymes.add_argument("second")
    p_rhymes.set_defaults(func=_cmd_rhymes, query_fields=("first", "second"))

    p_find = sub.add_parser("find", help="List dictionary words that rhyme with WORD")
    p_find.add_argument("word")
    p_find.add_argument("--top", type=int, default=int(FLAGS.get("TOP_K", 20)), help="Number of results to show")
    p_find.add_argument("--order", choices=ORDERS, default=FLAGS.get("RHYME_ORDER", "common"),
                        help="Rank by most common or rarest first")
    p_find.set_defaults(func=_cmd_find, query_fields=("word",))
    return parser


def _normalize_args(args: argparse.Namespace) -> None:
    for field in args.query_fields:
        value = getattr(args, field)
        if isinstance(value, list):
            setattr(args, field, [normalize_query(v, args.case) for v in value])
        else:
            setattr(args, field, normalize_query(value, args.case))


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging(str(FLAGS.get("LOG_LEVEL", "INFO")))
    args = build_parser().parse_args(argv)
    _normalize_args(args)
    try:
        index = load_dictionary(args.dict_path, allow_fallback=False if args.no_fallback else None)
    except DictionaryError as exc:
        log.error("Could not load dictionary: %s", exc)
        return 2
    return args.func(index, args)


if __name__ == "__main__":
    raise SystemExit(main())
