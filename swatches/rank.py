from __future__ import annotations

"""
Palette ordering.

Exports:
- rank_palette(colours, mode) -> list[Swatch]

Modes:
- "dominant": count, descending. Stable for equal counts.
- "vibrant" : HSV saturation x value, descending; ties by count, descending.
- "unique"  : (distance to the nearest other swatch) x ln(count + 1), descending.
              Frequency damps distinct but rare colours.

Ranking only reorders; it never adds, drops or relocks entries.
"""

from typing import List, Sequence

import numpy as np

from .colour_convert import pairwise_rgb_distance, vibrancy
from .config import RankMode, resolve_rank_mode
from .core_types import Swatch


def uniqueness_scores(colours: Sequence[Swatch]) -> np.ndarray:
    """Nearest-neighbour RGB distance weighted by ln(count + 1)."""
    if not colours:
        return np.zeros((0,), dtype=np.float64)
    rgb = np.array([s.rgb for s in colours], dtype=np.int64)
    counts = np.array([s.count for s in colours], dtype=np.float64)
    nearest = pairwise_rgb_distance(rgb).min(axis=1)
    return nearest * np.log(counts + 1.0)


def rank_palette(colours: Sequence[Swatch], mode: RankMode = "dominant") -> List[Swatch]:
    """Return a reordered copy of colours according to mode."""
    mode = resolve_rank_mode(mode)
    items = list(colours)
    if len(items) < 2:
        return items

    if mode == "vibrant":
        sv = vibrancy(np.array([s.rgb for s in items], dtype=np.uint8)).tolist()
        order = sorted(
            range(len(items)), key=lambda i: (sv[i], items[i].count), reverse=True
        )
        return [items[i] for i in order]

    if mode == "unique":
        scores = uniqueness_scores(items).tolist()
        order = sorted(range(len(items)), key=lambda i: scores[i], reverse=True)
        return [items[i] for i in order]

    return sorted(items, key=lambda s: s.count, reverse=True)


__all__ = ["uniqueness_scores", "rank_palette"]
