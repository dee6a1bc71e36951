import argparse
import sys
from typing import List, Optional

from jokerhand.poker.cards import Hand, hand_str
from jokerhand.poker.hand_eval import judge, matching
from jokerhand.poker.parse import FormatError, parse_hand
from jokerhand.poker.settings import Settings


def _report(hand: Hand, show_all: bool) -> None:
    if show_all:
        for res in matching(hand):
            print(res)
    else:
        print(judge(hand))


def _run_file(path: str, settings: Settings, show_all: bool) -> int:
    failed = 0
    with open(path, "r") as f:
        print(f"Deck: {settings.name}")
        for n, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                hand = parse_hand(
                    line,
                    min_number=settings.min_number,
                    max_number=settings.max_number,
                )
            except FormatError as e:
                failed += 1
                print(f"line {n}: format error: {e}")
                continue
            print(f"line {n}: {hand_str(hand)}")
            _report(hand, show_all)
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="jokerhand: five-card hand judge with one Joker")

    ap.add_argument("--settings", help="Path to settings YAML (default: built-in)")
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--hand", help='Judge a hand like "S-2 H-3 S-4 D-5 Joker"')
    source.add_argument("--file", help="Judge every non-blank line of a text file")
    ap.add_argument(
        "--all",
        action="store_true",
        help="Show every matching category, highest first",
    )

    args = ap.parse_args(argv)

    try:
        settings = Settings.from_yaml(args.settings) if args.settings else Settings()
    except (OSError, ValueError) as e:
        raise SystemExit(f"settings error: {e}")

    # batch mode: one bad line does not stop the rest
    if args.file:
        try:
            status = _run_file(args.file, settings, args.all)
        except OSError as e:
            raise SystemExit(f"cannot read {args.file}: {e}")
        raise SystemExit(status)

    if args.hand is not None:
        raw = args.hand
    else:
        print(f"( example ) input: {settings.example}")
        print(settings.prompt, end="", flush=True)
        raw = sys.stdin.readline().strip()
        print()

    try:
        hand = parse_hand(raw, min_number=settings.min_number, max_number=settings.max_number)
    except FormatError as e:
        print(f"format error: {e}", file=sys.stderr)
        raise SystemExit(2)

    _report(hand, args.all)


if __name__ == "__main__":
    main()
