from __future__ import annotations

"""
Centroid seeding.

Exports:
  seed_centroids(pool, k, locked_rgb, rng) -> (centres, locked_mask)

Locked colours come first, in the order given, and never move afterwards.
The remaining k - len(locked) slots are drawn from a shuffled copy of the
pool, wrapping around when k exceeds the pool size.
"""

from typing import Sequence, Tuple

import numpy as np

from .core_types import RGBTuple, U8Pixels
from .errors import EmptyInputError


def seed_centroids(
    pool: U8Pixels,
    k: int,
    locked_rgb: Sequence[RGBTuple],
    rng: np.random.Generator,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the initial centroid table.

    Args:
      pool: uint8 [N,3] working pixels
      k: requested centroid count
      locked_rgb: pinned colours, seeded first
      rng: random source for the shuffle
    Returns:
      centres: int64 [C,3], C == max(k, len(locked_rgb)) unless both are 0
      locked_mask: bool [C], True for pinned rows
    Raises:
      EmptyInputError: if the pool is empty
    """
    if pool.shape[0] == 0:
        raise EmptyInputError("cannot seed centroids from an empty pixel pool")

    n_locked = len(locked_rgb)
    need = max(0, int(k) - n_locked)

    rows = [tuple(int(c) for c in rgb) for rgb in locked_rgb]
    if need > 0:
        order = rng.permutation(pool.shape[0])
        picks = order[np.arange(need) % order.size]
        rows.extend(tuple(int(c) for c in pool[i]) for i in picks.tolist())
    if not rows:
        rows.append(tuple(int(c) for c in pool[0]))

    centres = np.array(rows, dtype=np.int64).reshape(-1, 3)
    locked_mask = np.zeros(centres.shape[0], dtype=bool)
    locked_mask[:n_locked] = True
    return centres, locked_mask


__all__ = ["seed_centroids"]
