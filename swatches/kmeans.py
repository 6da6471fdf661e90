from __future__ import annotations

"""
Lloyd k-means over RGB pixel samples with pinned centroids.

Steps:
  1. Working pool: optionally drop near-neutral pixels (falls back to all
     pixels when nothing survives), then stride down to MAX_POOL_PIXELS.
  2. Seed centroids (locked first) from the pool.
  3. Iterate nearest-centre assignment and rounded-mean updates. Locked rows
     never move; an unlocked row that attracts no pixels is reseeded to a
     random pool pixel.
  4. Count every original pixel against the final centres.

Unlocked centres that end with zero pixels are dropped; locked centres are
always kept and report a count of at least 1.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .colour_convert import saturation, squared_rgb_distance
from .constants import (
    ASSIGN_CHUNK,
    DEFAULT_MAX_ITERS,
    MAX_POOL_PIXELS,
    NEUTRAL_SAT_MIN,
)
from .core_types import RGBTuple, Swatch, U8Pixels, as_pixel_array, round_half_up
from .errors import EmptyInputError
from .seeding import seed_centroids
from .utils import debug_log, key_value_pairs_to_string


# Working pool


def drop_neutrals(pixels: U8Pixels, debug: bool = False) -> U8Pixels:
    """
    Keep pixels with HSV saturation >= NEUTRAL_SAT_MIN.
    If that removes everything, return the unfiltered pixels instead.
    """
    keep = saturation(pixels) >= NEUTRAL_SAT_MIN
    if not np.any(keep):
        if debug:
            debug_log("neutral filter removed every pixel; using unfiltered pool")
        return pixels
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [("Neutral filter", f"{int(keep.sum()):,}/{pixels.shape[0]:,} kept")]
            )
        )
    return pixels[keep]


def subsample_pool(pixels: U8Pixels, max_pixels: int = MAX_POOL_PIXELS) -> U8Pixels:
    """Evenly strided subset when there are more than max_pixels rows."""
    n = pixels.shape[0]
    if n <= max_pixels:
        return pixels
    step = n // max_pixels
    return pixels[::step]


# Assignment


def nearest_indices(
    pixels: np.ndarray, centres: np.ndarray, chunk: int = ASSIGN_CHUNK
) -> np.ndarray:
    """
    Index of the nearest centre for each pixel by squared RGB distance.
    Ties go to the lowest centre index.
    """
    n = pixels.shape[0]
    out = np.empty(n, dtype=np.int64)
    cen = centres.astype(np.int64, copy=False)
    for i in range(0, n, chunk):
        pts = pixels[i : i + chunk].astype(np.int64)
        de2 = squared_rgb_distance(pts[:, None, :], cen[None, :, :])
        out[i : i + chunk] = np.argmin(de2, axis=1)
    return out


def count_assignments(pixels: np.ndarray, centres: np.ndarray) -> np.ndarray:
    """Pixels nearest to each centre over the full pixel set."""
    if pixels.shape[0] == 0:
        return np.zeros(centres.shape[0], dtype=np.int64)
    idx = nearest_indices(pixels, centres)
    return np.bincount(idx, minlength=centres.shape[0]).astype(np.int64)


# Optimisation loop


def lloyd_iterations(
    pool: U8Pixels,
    centres: np.ndarray,
    locked_mask: np.ndarray,
    rng: np.random.Generator,
    max_iters: int = DEFAULT_MAX_ITERS,
) -> Tuple[np.ndarray, int]:
    """
    Refine unlocked centres in place until nothing moves or max_iters passes.

    Returns:
      (centres, iterations_run)
    """
    n_centres = centres.shape[0]
    pool_i = pool.astype(np.int64)
    free = ~locked_mask
    iters = 0

    for _ in range(max_iters):
        iters += 1
        idx = nearest_indices(pool_i, centres)
        weights = np.bincount(idx, minlength=n_centres)
        sums = np.stack(
            [
                np.bincount(idx, weights=pool_i[:, ch], minlength=n_centres)
                for ch in range(3)
            ],
            axis=1,
        )

        moved = False
        for c in np.nonzero(free)[0].tolist():
            if weights[c] > 0:
                new = round_half_up(sums[c] / weights[c]).astype(np.int64)
                if not np.array_equal(new, centres[c]):
                    centres[c] = new
                    moved = True
            else:
                centres[c] = pool_i[int(rng.integers(pool_i.shape[0]))]
                moved = True
        if not moved:
            break

    return centres, iters


def _freeze(
    centres: np.ndarray, locked_mask: np.ndarray, counts: np.ndarray
) -> List[Swatch]:
    out: List[Swatch] = []
    for row, locked, n in zip(centres.tolist(), locked_mask.tolist(), counts.tolist()):
        if not locked and n == 0:
            continue
        out.append(
            Swatch(
                r=int(row[0]),
                g=int(row[1]),
                b=int(row[2]),
                count=max(1, int(n)),
                locked=bool(locked),
            )
        )
    return out


def cluster_colours(
    pixels: U8Pixels,
    k: int,
    locked_rgb: Sequence[RGBTuple] = (),
    *,
    ignore_neutrals: bool = False,
    max_iters: int = DEFAULT_MAX_ITERS,
    rng: Optional[np.random.Generator] = None,
    debug: bool = False,
) -> List[Swatch]:
    """
    Quantise pixels to at most max(k, len(locked_rgb)) swatches.

    Args:
      pixels: uint8 [N,3] (or anything as_pixel_array accepts)
      k: requested colour count
      locked_rgb: pinned colours; seeded first and never updated
      ignore_neutrals: exclude low-saturation pixels from the working pool
      max_iters: iteration cap for the optimisation loop
      rng: random source for seeding and empty-cluster repair
      debug: print pool and convergence stats
    Returns:
      list[Swatch] in centroid order (locked first), counts over all pixels
    Raises:
      EmptyInputError: if no pixels are supplied
    """
    pixels = as_pixel_array(pixels)
    if pixels.shape[0] == 0:
        raise EmptyInputError("no pixels supplied for clustering")
    if rng is None:
        rng = np.random.default_rng()

    working = drop_neutrals(pixels, debug=debug) if ignore_neutrals else pixels
    pool = subsample_pool(working)

    centres, locked_mask = seed_centroids(pool, k, locked_rgb, rng)
    centres, iters = lloyd_iterations(pool, centres, locked_mask, rng, max_iters)
    counts = count_assignments(pixels, centres)

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Pixels", int(pixels.shape[0])),
                    ("Pool", int(pool.shape[0])),
                    ("Centres", int(centres.shape[0])),
                    ("Locked", int(locked_mask.sum())),
                    ("Iterations", iters),
                    ("Empty", int(np.count_nonzero(counts == 0))),
                ]
            )
        )

    return _freeze(centres, locked_mask, counts)


__all__ = [
    "drop_neutrals",
    "subsample_pool",
    "nearest_indices",
    "count_assignments",
    "lloyd_iterations",
    "cluster_colours",
]
