from __future__ import annotations

"""
Near-duplicate swatch merging.

Exports:
  merge_close_colours(colours, threshold, debug=False) -> list[Swatch]

Single greedy pass in list order. Each unconsumed, unlocked swatch absorbs
every later unconsumed, unlocked swatch within `threshold` (Euclidean RGB)
of its running count-weighted average. Locked swatches pass through
untouched and are never merge candidates. threshold == 0 disables merging.
"""

import math
from typing import List, Sequence

from .constants import DEFAULT_MERGE_THRESHOLD
from .core_types import Swatch
from .utils import debug_log, key_value_pairs_to_string


def _weighted_channel(base: int, base_w: int, other: int, other_w: int) -> int:
    # round half up, matching the centroid update
    return int(math.floor((base * base_w + other * other_w) / (base_w + other_w) + 0.5))


def merge_close_colours(
    colours: Sequence[Swatch],
    threshold: float = DEFAULT_MERGE_THRESHOLD,
    debug: bool = False,
) -> List[Swatch]:
    """
    Collapse near-duplicate swatches.

    Args:
      colours: swatches in their current order
      threshold: max RGB distance to the running average; 0 disables
      debug: print before/after counts
    Returns:
      new list, no longer than the input, in first-occurrence order
    """
    if threshold <= 0 or not colours:
        return list(colours)

    out: List[Swatch] = []
    used = [False] * len(colours)
    limit2 = float(threshold) * float(threshold)

    for i, base in enumerate(colours):
        if used[i]:
            continue
        used[i] = True
        if base.locked:
            out.append(base)
            continue

        r, g, b = base.rgb
        total = max(1, base.count)
        for j in range(i + 1, len(colours)):
            if used[j]:
                continue
            other = colours[j]
            if other.locked:
                continue
            dr, dg, db = r - other.r, g - other.g, b - other.b
            if dr * dr + dg * dg + db * db <= limit2:
                w = max(1, other.count)
                r = _weighted_channel(r, total, other.r, w)
                g = _weighted_channel(g, total, other.g, w)
                b = _weighted_channel(b, total, other.b, w)
                total += w
                used[j] = True
        out.append(Swatch(r=r, g=g, b=b, count=total, locked=False))

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [("Merge", threshold), ("Before", len(colours)), ("After", len(out))]
            )
        )
    return out


__all__ = ["merge_close_colours"]
