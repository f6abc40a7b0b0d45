import argparse
import sys
from typing import List, Optional

from combo.combinator import combinations
from combo.drain import drain
from combo.drain_conf import DrainConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print all K-combinations of range(N), one numbered line per combination.",
    )
    parser.add_argument("n", type=int, help="Length of the sequence 0..N-1")
    parser.add_argument("k", type=int, help="Combination length")
    parser.add_argument("--limit", type=int, default=None, help="Stop after this many combinations")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--verbose", action="store_true", help="Print status lines")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = DrainConfig(limit=args.limit, progress=args.progress, verbose=args.verbose)

    try:
        if args.n < 0:
            raise ValueError(f"n must be >= 0 (got {args.n})")
        cfg.validate()
        combinator = combinations(list(range(args.n)), args.k)
    except ValueError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 2

    if cfg.verbose:
        print(f"[CFG] n={args.n} k={args.k} total={combinator.total} limit={cfg.limit}")

    for i, combo in enumerate(drain(combinator, cfg)):
        print(f"{i}: {list(combo)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
