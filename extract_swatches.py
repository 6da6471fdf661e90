#!/usr/bin/env python3
"""
extract_swatches.py
Quantise pixel samples to a small ranked palette of swatches.

Usage:
  python extract_swatches.py [PIXEL ...] -k K --mode [dominant|vibrant|unique]
                             --merge T --ignore-neutrals --lock HEX --seed N --debug

Input:
  Hex pixel tokens as arguments, or whitespace-separated on stdin when no
  arguments are given. A token may carry a repeat count: '#ff0000x1000'.

Output:
  One line per swatch in rank order: hex, pixel count, share, lock mark.

Notes:
  Image decoding and sampling happen upstream; this tool only sees pixels.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, List, Optional, Sequence

import numpy as np

from swatches.config import RANK_MODES, SwatchConfig
from swatches.constants import DEFAULT_K, K_UI_RANGE, MERGE_UI_RANGE
from swatches.core_types import U8Pixels, hex_list_to_u8_rgb_array
from swatches.errors import SwatchError
from swatches.pipeline import generate_palette
from swatches.utils import (
    error,
    format_seconds_compact,
    format_swatch_line,
    log,
    palette_report,
    print_banner,
    print_config_line,
)


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for palette extraction.

    Returns:
      argparse.Namespace with:
        pixels: list of hex tokens (may be empty -> read stdin)
        k: palette size
        mode: "dominant" | "vibrant" | "unique"
        merge: merge threshold, 0 disables
        ignore_neutrals: bool
        lock: list of pinned hex colours
        seed: optional int for reproducible runs
        debug: bool for stage details
    """
    parser = argparse.ArgumentParser(
        prog="extract_swatches",
        description="Quantise pixel samples to a ranked palette of swatches.",
    )
    parser.add_argument("pixels", nargs="*", help="Hex pixels, e.g. '#ff0000' or '#ff0000x50'")
    parser.add_argument(
        "-k",
        type=int,
        default=DEFAULT_K,
        help=f"Number of swatches (usual range {K_UI_RANGE[0]}-{K_UI_RANGE[1]})",
    )
    parser.add_argument(
        "--mode", choices=list(RANK_MODES), default="dominant", help="Ranking strategy."
    )
    parser.add_argument(
        "--merge",
        type=int,
        default=0,
        help=f"Merge swatches closer than T, 0 = off (usual range {MERGE_UI_RANGE[0]}-{MERGE_UI_RANGE[1]})",
    )
    parser.add_argument(
        "--ignore-neutrals", action="store_true", help="Skip near-grey pixels when fitting"
    )
    parser.add_argument(
        "--lock", action="append", default=[], metavar="HEX", help="Pin a colour (repeatable)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--debug", action="store_true", help="Verbose stage details")
    return parser.parse_args(argv)


def parse_pixel_tokens(tokens: Iterable[str]) -> U8Pixels:
    """
    Expand hex tokens into a (N,3) uint8 array.
    '#rrggbbxN' repeats the colour N times.
    """
    hexes: List[str] = []
    repeats: List[int] = []
    for token in tokens:
        hex_part, _, repeat = token.strip().lower().partition("x")
        if not hex_part:
            continue
        n = int(repeat) if repeat else 1
        if n < 0:
            raise ValueError(f"negative repeat in {token!r}")
        hexes.append(hex_part)
        repeats.append(n)
    if not hexes:
        return np.zeros((0, 3), dtype=np.uint8)
    return np.repeat(hex_list_to_u8_rgb_array(hexes), repeats, axis=0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = parse_cli_args(argv)
    tokens = args.pixels if args.pixels else sys.stdin.read().split()

    try:
        pixels = parse_pixel_tokens(tokens)
        config = SwatchConfig(
            k=args.k,
            rank_mode=args.mode,
            ignore_neutrals=args.ignore_neutrals,
            merge_threshold=args.merge,
            locked_colors=tuple(args.lock),
        )
    except ValueError as exc:
        error(str(exc))
        return 2

    print_config_line(
        "run",
        [
            ("Pixels", int(pixels.shape[0])),
            ("K", config.k),
            ("Mode", config.rank_mode),
            ("Merge", config.merge_threshold),
            ("Locks", len(config.locked_colors)),
        ],
        debug=False,
    )

    t0 = time.perf_counter()
    try:
        palette = generate_palette(pixels, config, seed=args.seed, debug=args.debug)
    except SwatchError as exc:
        error(str(exc))
        return 2

    print_banner(f"{len(palette)} swatches in {format_seconds_compact(time.perf_counter() - t0)}")
    for i, (hex_code, count, share, locked) in enumerate(palette_report(palette), start=1):
        log(format_swatch_line(i, hex_code, count, share, locked))
    return 0


if __name__ == "__main__":
    sys.exit(main())
