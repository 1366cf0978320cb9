"""Parse BEL script files and report what they contain.

Usage:
    belscript-check small_corpus.bel
    belscript-check corpus/*.bel -v
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from .errors import ParseError
from .model import Statement
from .script import parse_file


def check_file(path: Path) -> tuple[Counter, Counter]:
    """Parse one file. Returns (object counts by type, statement counts by shape)."""
    kinds: Counter = Counter()
    shapes: Counter = Counter()
    for obj in parse_file(path):
        kinds[obj.type] += 1
        if isinstance(obj, Statement):
            shapes[obj.shape.value] += 1
    return kinds, shapes


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse BEL script files")
    parser.add_argument("files", nargs="+", type=Path, help="BEL script files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each parsed line")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    errors: list[tuple[Path, str]] = []
    for path in args.files:
        try:
            kinds, shapes = check_file(path)
        except (ParseError, OSError, UnicodeDecodeError) as e:
            errors.append((path, str(e)))
            print(f"  FAIL  {path}")
            continue

        total = sum(kinds.values())
        shape_summary = ", ".join(f"{k}={v}" for k, v in sorted(shapes.items()))
        print(f"  OK    {path}: {total} objects, {sum(shapes.values())} statements ({shape_summary})")

    if errors:
        print()
        print("  Errors:")
        for path, e in errors:
            print(f"    {path}: {e}")
        return 1

    print()
    print("  All clear.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
