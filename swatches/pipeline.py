from __future__ import annotations

"""
Palette generation entry point.

Maps sampled pixels to a ranked palette:
  seed + cluster -> merge near duplicates (optional) -> top-up re-cluster when
  merging left fewer than k -> trim to k -> rank -> reconcile lock flags.

The engine keeps no state between calls. The caller passes the lock set
derived from whatever palette it currently shows (see palette_lock.locked_hexes)
and receives a fresh list each time.
"""

import time
from typing import List, Optional, Sequence, Union

import numpy as np

from .config import SwatchConfig
from .core_types import HexStr, Swatch, U8Pixels, as_pixel_array
from .errors import EmptyInputError
from .kmeans import cluster_colours
from .merge import merge_close_colours
from .palette_lock import locks_to_rgb, palette_set, reconcile_locks
from .rank import rank_palette
from .utils import (
    debug_log,
    format_seconds_compact,
    key_value_pairs_to_string,
    print_config_line,
    warn,
)

Seed = Union[None, int, np.random.Generator]


def _unique_hexes(colours: Sequence[Swatch]) -> List[HexStr]:
    seen = set()
    out: List[HexStr] = []
    for s in colours:
        if s.hex not in seen:
            seen.add(s.hex)
            out.append(s.hex)
    return out


def generate_palette(
    pixels: U8Pixels,
    config: Optional[SwatchConfig] = None,
    *,
    seed: Seed = None,
    debug: bool = False,
) -> List[Swatch]:
    """
    Run one full generation cycle.

    Args:
      pixels: uint8 [N,3] samples (or any sequence of RGB triples)
      config: SwatchConfig; defaults to SwatchConfig()
      seed: None for system entropy, an int, or a numpy Generator to draw from
      debug: print stage stats
    Returns:
      list[Swatch], at most config.k long, ranked by config.rank_mode. Exactly
      the swatches matching config.effective_locks() are flagged locked.
    Raises:
      EmptyInputError: no pixels
    """
    cfg = config if config is not None else SwatchConfig()
    pixels = as_pixel_array(pixels)
    if pixels.shape[0] == 0:
        raise EmptyInputError("no pixels supplied; nothing to quantise")

    t0 = time.perf_counter()
    rng = np.random.default_rng(seed)
    locks = cfg.effective_locks()

    if debug:
        print_config_line(
            "palette",
            [
                ("K", cfg.k),
                ("Mode", cfg.rank_mode),
                ("Neutrals", "ignored" if cfg.ignore_neutrals else "kept"),
                ("Merge", cfg.merge_threshold),
                ("Locks", len(locks)),
            ],
            debug=True,
        )

    dropped = len(cfg.locked_colors) - len(locks)
    if dropped > 0:
        warn(f"{dropped} locked colour(s) beyond k={cfg.k} released")

    result = cluster_colours(
        pixels,
        cfg.k,
        locks_to_rgb(locks),
        ignore_neutrals=cfg.ignore_neutrals,
        max_iters=cfg.max_iters,
        rng=rng,
        debug=debug,
    )

    if cfg.merge_threshold > 0:
        result = merge_close_colours(result, cfg.merge_threshold, debug=debug)
        if len(result) < cfg.k:
            survivors = _unique_hexes(result)
            if debug:
                debug_log(
                    key_value_pairs_to_string(
                        [("Top-up", cfg.k - len(result)), ("Pinned", len(survivors))]
                    )
                )
            result = cluster_colours(
                pixels,
                cfg.k,
                locks_to_rgb(survivors),
                ignore_neutrals=cfg.ignore_neutrals,
                max_iters=cfg.max_iters,
                rng=rng,
                debug=debug,
            )

    result = rank_palette(result[: cfg.k], cfg.rank_mode)
    result = reconcile_locks(result, locks)

    if debug:
        present = palette_set(result)
        kept = sum(1 for rgb in locks_to_rgb(locks) if rgb in present)
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Swatches", len(result)),
                    ("Locks kept", f"{kept}/{len(locks)}"),
                    ("Time", format_seconds_compact(time.perf_counter() - t0)),
                ]
            )
        )
    return result


__all__ = ["Seed", "generate_palette"]
