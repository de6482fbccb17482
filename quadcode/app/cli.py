from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..config import Limits
from ..encoding import count_symbols, encode_grid
from ..grid import PixelGrid
from ..loaders import ManualLoader, load_grid
from ..render import format_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadcode",
        description="Encode binary images given as PBM files or typed in manually.",
        add_help=False,
    )
    parser.add_argument("-?", "--help", action="help", help="Show this help message and exit")
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("-m", "--manual", action="store_true", help="Manual input mode (type the image in)")
    source_group.add_argument("-f", "--file", metavar="FILE", help="Encode the image stored in a PBM (or raster image) file")
    parser.add_argument("--max-width", type=int, metavar="N", help="Largest accepted image width")
    parser.add_argument("--max-height", type=int, metavar="N", help="Largest accepted image height")
    parser.add_argument("--code-only", action="store_true", help="Print only the resulting code")
    parser.add_argument("--stats", action="store_true", help="Also print the number of X/P/B symbols")
    parser.add_argument(
        "--no-dither",
        dest="dither",
        action="store_false",
        help="Threshold raster images instead of dithering them",
    )
    return parser


def _resolve_limits(args: argparse.Namespace) -> Limits:
    return Limits.from_env().override(args.max_width, args.max_height)


def load_input(args: argparse.Namespace, limits: Limits) -> PixelGrid:
    if args.manual:
        return ManualLoader().load(limits)
    return load_grid(args.file, limits, dither=args.dither)


def present(grid: PixelGrid, code: str, code_only: bool, stats: bool) -> None:
    if not code_only:
        print(format_grid(grid))
        print("Resulting code:")
    print(code)
    if stats:
        counts = count_symbols(code)
        print(
            f"Symbols: {counts.total} (X={counts.internal}, P={counts.black_leaves}, B={counts.white_leaves})",
            file=sys.stderr,
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)
    if not args.manual and not args.file:
        parser.print_usage(sys.stderr)
        print("Error: choose -m/--manual or -f/--file FILE.", file=sys.stderr)
        return 2
    try:
        limits = _resolve_limits(args)
        grid = load_input(args, limits)
        code = encode_grid(grid)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    present(grid, code, args.code_only, args.stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
