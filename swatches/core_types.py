from __future__ import annotations

"""
Core type aliases, the swatch value object, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Pixels = NDArray[np.uint8]  # (N, 3)

# Value objects


@dataclass(frozen=True)
class Swatch:
    """Representative colour with its pixel weight and pin state."""

    r: int
    g: int
    b: int
    count: int
    locked: bool = False

    @property
    def rgb(self) -> RGBTuple:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)


# Small helpers


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round .5 away from zero for non-negative inputs (not banker's rounding)."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB triple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb', '#rrggbb' or 'rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        s = f"#{s}"
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError(f"hex must be '#rrggbb' or '#rgb': {hex_str!r}")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def normalise_hex(hex_str: str) -> HexStr:
    """Canonical '#rrggbb' form used for lock bookkeeping."""
    return rgb_to_hex(hex_to_rgb(hex_str))


def hex_list_to_u8_rgb_array(hex_list: Sequence[str]) -> U8Pixels:
    """Convert a sequence of hex strings to a (N,3) uint8 array."""
    out = np.empty((len(hex_list), 3), dtype=np.uint8)
    for i, hx in enumerate(hex_list):
        out[i] = hex_to_rgb(hx)
    return out


def as_pixel_array(
    pixels: Union[Sequence[Sequence[int]], NDArray[np.generic]],
) -> U8Pixels:
    """
    Coerce pixel samples to a contiguous (N,3) uint8 array.

    Accepts an (N,3) or (N,>=3) array, or any sequence of RGB triples.
    Extra trailing channels (alpha) are dropped.
    """
    arr = np.asarray(pixels)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.uint8)
    if arr.ndim != 2 or arr.shape[1] < 3:
        raise TypeError("expected pixel samples shaped (N,3)")
    rgb = arr[:, :3]
    if rgb.dtype != np.uint8:
        if not np.issubdtype(rgb.dtype, np.number):
            raise TypeError("pixel channels must be numeric")
        if np.any(rgb < 0) or np.any(rgb > 255):
            raise ValueError("pixel channels must be within 0..255")
        rgb = rgb.astype(np.uint8)
    return np.ascontiguousarray(rgb)


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Pixels",
    # value objects
    "Swatch",
    # helpers
    "round_half_up",
    "rgb_to_hex",
    "hex_to_rgb",
    "normalise_hex",
    "hex_list_to_u8_rgb_array",
    "as_pixel_array",
]
