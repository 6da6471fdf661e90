# swatches/palette_lock.py
from __future__ import annotations

"""
Palette lock helpers.

Functions:
  palette_set(palette) -> set of RGB tuples
  locked_hexes(palette) -> tuple of '#rrggbb' for pinned entries
  locks_to_rgb(locked_colors) -> list of RGB tuples
  reconcile_locks(palette, locked_colors) -> list[Swatch]

Use cases:
  - locked_hexes: build the lock set for the next regeneration from the
    palette the caller currently shows
  - reconcile_locks: after ranking, flag exactly the swatches whose hex
    matches a colour that was locked going into this cycle

Reconciliation is exact-match bookkeeping. Pinned colours survive because
locked centroids are frozen during clustering and skipped by merging.
"""

from dataclasses import replace
from typing import Iterable, List, Sequence, Set, Tuple

from .core_types import HexStr, RGBTuple, Swatch, hex_to_rgb, normalise_hex


def palette_set(palette: Sequence[Swatch]) -> Set[RGBTuple]:
    """Return a set of all RGB tuples present in the palette."""
    return {s.rgb for s in palette}


def locked_hexes(palette: Sequence[Swatch]) -> Tuple[HexStr, ...]:
    """Hex codes of locked swatches, in palette order, without repeats."""
    seen: Set[HexStr] = set()
    out: List[HexStr] = []
    for s in palette:
        if s.locked and s.hex not in seen:
            seen.add(s.hex)
            out.append(s.hex)
    return tuple(out)


def locks_to_rgb(locked_colors: Iterable[str]) -> List[RGBTuple]:
    """Parse hex lock codes into RGB tuples, keeping order."""
    return [hex_to_rgb(hx) for hx in locked_colors]


def reconcile_locks(
    palette: Sequence[Swatch], locked_colors: Iterable[str]
) -> List[Swatch]:
    """
    Recompute every lock flag: locked iff the swatch hex is in locked_colors.
    Order and colours are untouched.
    """
    wanted = {normalise_hex(hx) for hx in locked_colors}
    out: List[Swatch] = []
    for s in palette:
        flag = s.hex in wanted
        out.append(s if s.locked == flag else replace(s, locked=flag))
    return out


__all__ = [
    "palette_set",
    "locked_hexes",
    "locks_to_rgb",
    "reconcile_locks",
]
