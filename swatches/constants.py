"""
Global tunables used across the project.

- Palette size and merge ranges (K_*, MERGE_*)
- Clustering bounds (MAX_POOL_PIXELS, DEFAULT_MAX_ITERS, ASSIGN_CHUNK)
- Neutral filtering (NEUTRAL_SAT_MIN)
"""
from __future__ import annotations

import math
from typing import Tuple

# ==============
# Palette sizing
# ==============
DEFAULT_K: int = 8
K_UI_RANGE: Tuple[int, int] = (3, 20)

# =======
# Merging
# =======
DEFAULT_MERGE_THRESHOLD: int = 18
MERGE_UI_RANGE: Tuple[int, int] = (0, 40)
MAX_RGB_DISTANCE: float = math.sqrt(3 * 255.0 * 255.0)  # ~441.67

# ==========
# Clustering
# ==========
MAX_POOL_PIXELS: int = 20_000
DEFAULT_MAX_ITERS: int = 10
ASSIGN_CHUNK: int = 50_000

# =========
# Neutrals
# =========
NEUTRAL_SAT_MIN: float = 0.1

__all__ = [
    "DEFAULT_K",
    "K_UI_RANGE",
    "DEFAULT_MERGE_THRESHOLD",
    "MERGE_UI_RANGE",
    "MAX_RGB_DISTANCE",
    "MAX_POOL_PIXELS",
    "DEFAULT_MAX_ITERS",
    "ASSIGN_CHUNK",
    "NEUTRAL_SAT_MIN",
]
