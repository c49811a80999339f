"""Compare a phrase against its reference from the command line.

    python -m phrase_compare "Il est beau aujourd'hui!" "Il fait beau aujourd'hui!"
    python -m phrase_compare --json --remote http://localhost:5000 "..." "..."
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .client import remote_analyze
from .config import ComparisonConfig
from .engine import PhraseComparer
from .renderer import to_markup


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrase_compare",
        description="Score a submitted phrase against a reference phrase.",
    )
    parser.add_argument("submission", help="Phrase typed by the player")
    parser.add_argument("reference", help="Correct phrase")
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    parser.add_argument("--markup", action="store_true", help="Print the inline-styled HTML diff")
    parser.add_argument("--remote", metavar="URL", help="Ask a running comparison service instead")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def print_summary(result: dict) -> None:
    print(f"Total votes: {result['total_votes']}")
    print(f"Correct: {len(result['correct_words'])}")
    print(f"Missing: {', '.join(result['missing_words']) or '-'}")
    print(f"Extra: {', '.join(result['extra_words']) or '-'}")
    if result["errors"]:
        print("\n=== Errors ===")
        for err in result["errors"]:
            print(f"  {err['kind']}: {err['submitted_text']!r} -> {err['correct_text']!r} ({err['votes']} vote(s))")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.remote:
        result = remote_analyze(args.submission, args.reference, base_url=args.remote)
        if result is None:
            print("ERROR: comparison service unavailable", file=sys.stderr)
            return 1
        markup = None
    else:
        comparer = PhraseComparer(ComparisonConfig.from_env())
        analysis = comparer.analyze(args.submission, args.reference)
        result = analysis.to_dict()
        markup = to_markup(analysis) if args.markup else None

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print_summary(result)

    if args.markup:
        if markup is None:
            print("(markup is only available for local comparisons)", file=sys.stderr)
        else:
            print(markup)
    return 0


if __name__ == "__main__":
    sys.exit(main())
