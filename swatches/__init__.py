"""
swatches package.

Purpose:
  Turn sampled pixel colours into a small, stable, ranked palette of swatches,
  with pinned colours that survive regeneration. See extract_swatches.py for CLI.

Public API:
  generate_palette : full pipeline entry point.
  SwatchConfig     : validated generation settings.
  Swatch           : output value object (r, g, b, count, locked).
  cluster_colours  : k-means with pinned centroids.
  merge_close_colours, rank_palette, reconcile_locks, locked_hexes
  colour_convert   : RGB to HSV and RGB distance helpers.
  core_types       : shared type aliases and hex helpers.
  errors           : SwatchError, EmptyInputError, InvalidConfigError.
  utils            : formatting and logging helpers.

Quick start:
  from swatches import generate_palette, SwatchConfig
  palette = generate_palette(pixels, SwatchConfig(k=6, rank_mode="vibrant"), seed=7)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import constants
from . import core_types
from . import errors
from . import utils

from .config import RankMode, SwatchConfig, resolve_rank_mode
from .core_types import Swatch, hex_to_rgb, rgb_to_hex
from .errors import EmptyInputError, InvalidConfigError, SwatchError
from .kmeans import cluster_colours
from .merge import merge_close_colours
from .palette_lock import locked_hexes, reconcile_locks
from .pipeline import generate_palette
from .rank import rank_palette

__all__ = [
    "__version__",
    "colour_convert",
    "constants",
    "core_types",
    "errors",
    "utils",
    "RankMode",
    "SwatchConfig",
    "resolve_rank_mode",
    "Swatch",
    "hex_to_rgb",
    "rgb_to_hex",
    "SwatchError",
    "EmptyInputError",
    "InvalidConfigError",
    "cluster_colours",
    "merge_close_colours",
    "locked_hexes",
    "reconcile_locks",
    "generate_palette",
    "rank_palette",
]
