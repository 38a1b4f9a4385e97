"""
bbow - command line driver

Reads text files, folders of *.txt documents or a CSV text column into
one WordBag and prints a short report.

    bbow data/
    bbow --csv-column plot data/*.csv --top 20
    bbow notes.txt --match hello world
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .corpus import bag_from_csv, bag_from_folder, bag_from_paths
from .wordbag import WordBag

log = logging.getLogger(__name__)


def _ingest(bag: WordBag, path: Path, csv_column: Optional[str]) -> None:
    if path.is_dir():
        bag_from_folder(path, bag)
    elif path.suffix.lower() == ".csv":
        if not csv_column:
            raise ValueError(f"{path}: CSV input needs --csv-column")
        bag_from_csv([path], csv_column, bag)
    else:
        bag_from_paths([path], bag)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bbow",
        description="Count the words of text files, folders or CSV columns (big bag of words).",
    )
    ap.add_argument("inputs", nargs="+", help="Text files, folders of *.txt, or CSV files")
    ap.add_argument("--csv-column", dest="csv_column", default=None,
                    help="Text column to read from CSV inputs")
    ap.add_argument("--top", type=int, default=20, help="How many frequent words to show (default 20)")
    ap.add_argument("--words", action="store_true", help="List every distinct word with its count")
    ap.add_argument("--match", nargs="*", default=[], metavar="WORD",
                    help="Report the count of these (lowercase) words")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    bag = WordBag()
    ok = 0
    for raw in args.inputs:
        path = Path(raw)
        try:
            _ingest(bag, path, args.csv_column)
        except (OSError, ValueError) as e:
            log.warning("Skipping %s: %s", path, e)
            continue
        ok += 1

    if not ok:
        print("No input could be read.", file=sys.stderr)
        return 2

    print("=" * 60)
    print(f"Inputs read:   {ok}/{len(args.inputs)}")
    print(f"Unique words:  {bag.len():,}")
    print(f"Total words:   {bag.count():,}")
    print("=" * 60)

    if args.top > 0 and not bag.is_empty():
        print(f"\nTop {args.top} most frequent words:")
        for word, count in bag.most_common(args.top):
            print(f"  {word:20s} : {count:6,}")

    if args.words:
        print("\nAll words:")
        for word, count in bag.items():
            print(f"  {word}\t{count}")

    if args.match:
        print("\nMatches:")
        for kw in args.match:
            print(f"  {kw:20s} : {bag.match_count(kw)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
