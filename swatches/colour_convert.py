from __future__ import annotations

"""
Colour conversions and RGB metrics.

Exports:
  rgb_to_hsv(rgb)
  saturation(rgb)
  vibrancy(rgb)
  squared_rgb_distance(a, b)
  pairwise_rgb_distance(rgb)
"""

import numpy as np

from .core_types import U8Pixels


# RGB to HSV


def rgb_to_hsv(rgb: np.ndarray) -> np.ndarray:
    """
    RGB to HSV with every component in [0,1].
    Accepts uint8 [0..255] rows (..., 3). Returns float64 with shape preserved.
    Hue of a grey is 0.
    """
    rgb_f = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb_f[..., 0], rgb_f[..., 1], rgb_f[..., 2]

    v = np.max(rgb_f, axis=-1)
    mn = np.min(rgb_f, axis=-1)
    delta = v - mn

    with np.errstate(invalid="ignore", divide="ignore"):
        s = np.where(v > 0.0, delta / np.where(v > 0.0, v, 1.0), 0.0)
        safe = np.where(delta > 0.0, delta, 1.0)
        h = np.where(
            v == r,
            (g - b) / safe + np.where(g < b, 6.0, 0.0),
            np.where(v == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
        )
    h = np.where(delta > 0.0, h / 6.0, 0.0)

    out = np.empty(rgb_f.shape, dtype=np.float64)
    out[..., 0] = h
    out[..., 1] = s
    out[..., 2] = v
    return out


def saturation(rgb: np.ndarray) -> np.ndarray:
    """HSV saturation per row."""
    return rgb_to_hsv(rgb)[..., 1]


def vibrancy(rgb: np.ndarray) -> np.ndarray:
    """HSV saturation x value per row, in [0,1]."""
    hsv = rgb_to_hsv(rgb)
    return hsv[..., 1] * hsv[..., 2]


# Distances


def squared_rgb_distance(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """(dr)^2 + (dg)^2 + (db)^2 with broadcasting. Returns int64."""
    diff = np.asarray(a, dtype=np.int64) - np.asarray(b, dtype=np.int64)
    return np.sum(diff * diff, axis=-1)


def pairwise_rgb_distance(rgb: U8Pixels) -> np.ndarray:
    """Euclidean RGB distance matrix [N,N] with +inf on the diagonal."""
    rows = np.asarray(rgb, dtype=np.int64).reshape(-1, 3)
    dist = np.sqrt(
        squared_rgb_distance(rows[:, None, :], rows[None, :, :]).astype(np.float64)
    )
    np.fill_diagonal(dist, np.inf)
    return dist


__all__ = [
    "rgb_to_hsv",
    "saturation",
    "vibrancy",
    "squared_rgb_distance",
    "pairwise_rgb_distance",
]
