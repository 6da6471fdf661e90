"""
Shared fixtures for swatches tests.
"""
import numpy as np
import pytest


def solid(rgb, n):
    """n copies of one colour as a uint8 (n,3) block."""
    return np.tile(np.array(rgb, dtype=np.uint8), (n, 1))


@pytest.fixture
def rng():
    """Deterministic random source."""
    return np.random.default_rng(1234)


@pytest.fixture
def red_blue_pixels():
    """1000 pure red then 1000 pure blue pixels."""
    return np.concatenate([solid((255, 0, 0), 1000), solid((0, 0, 255), 1000)])


@pytest.fixture
def noisy_pixels():
    """5000 random pixels around four colour blobs."""
    gen = np.random.default_rng(99)
    centres = np.array(
        [[200, 30, 40], [20, 120, 210], [240, 220, 60], [90, 90, 90]], dtype=np.int64
    )
    picks = gen.integers(0, len(centres), size=5000)
    noise = gen.integers(-20, 21, size=(5000, 3))
    return np.clip(centres[picks] + noise, 0, 255).astype(np.uint8)
