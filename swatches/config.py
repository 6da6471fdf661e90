from __future__ import annotations

"""
Generation settings and rank mode helpers.

Exports:
- RankMode
- resolve_rank_mode(requested) -> RankMode
- SwatchConfig(k, rank_mode, ignore_neutrals, merge_threshold, locked_colors, max_iters)

Notes:
- Locked colours are kept as an ordered, de-duplicated tuple of '#rrggbb'.
  A set is sorted first, since it has no order of its own.
- When more colours are locked than k, only the earliest k stay pinned
  (see SwatchConfig.effective_locks).
"""

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Iterable, Literal, Tuple, get_args

from .constants import DEFAULT_K, DEFAULT_MAX_ITERS
from .core_types import HexStr, normalise_hex
from .errors import InvalidConfigError


RankMode = Literal["dominant", "vibrant", "unique"]
RANK_MODES: Tuple[str, ...] = get_args(RankMode)


def resolve_rank_mode(requested: str) -> RankMode:
    """
    Resolve a user-supplied mode name ("Dominant", "vibrant", ...) to a RankMode.
    Unknown names raise InvalidConfigError.
    """
    name = str(requested).strip().lower()
    if name not in RANK_MODES:
        raise InvalidConfigError(
            f"unknown rank mode {requested!r}; expected one of {', '.join(RANK_MODES)}"
        )
    return name  # type: ignore[return-value]


def _normalise_locks(colours: Iterable[str]) -> Tuple[HexStr, ...]:
    """
    Canonical, de-duplicated lock tuple. Set input carries no order, so it
    is sorted by hex to keep the earliest-k cap the same in every process.
    """
    out = []
    for hx in colours:
        try:
            out.append(normalise_hex(hx))
        except (ValueError, AttributeError) as exc:
            raise InvalidConfigError(f"bad locked colour {hx!r}: {exc}") from exc
    if isinstance(colours, (set, frozenset)):
        out.sort()
    return tuple(dict.fromkeys(out))


@dataclass(frozen=True)
class SwatchConfig:
    """Validated settings for one palette generation cycle."""

    k: int = DEFAULT_K
    rank_mode: str = "dominant"
    ignore_neutrals: bool = False
    merge_threshold: int = 0
    locked_colors: Tuple[HexStr, ...] = field(default_factory=tuple)
    max_iters: int = DEFAULT_MAX_ITERS

    def __post_init__(self) -> None:
        if isinstance(self.k, bool) or not isinstance(self.k, Integral) or self.k <= 0:
            raise InvalidConfigError(f"k must be a positive integer, got {self.k!r}")
        if (
            isinstance(self.merge_threshold, bool)
            or not isinstance(self.merge_threshold, Real)
            or self.merge_threshold < 0
        ):
            raise InvalidConfigError(
                f"merge_threshold must be a number >= 0, got {self.merge_threshold!r}"
            )
        if (
            isinstance(self.max_iters, bool)
            or not isinstance(self.max_iters, Integral)
            or self.max_iters < 1
        ):
            raise InvalidConfigError(f"max_iters must be an integer >= 1, got {self.max_iters!r}")
        if isinstance(self.locked_colors, str):
            raise InvalidConfigError("locked_colors must be a collection of hex strings")
        object.__setattr__(self, "k", int(self.k))
        object.__setattr__(self, "rank_mode", resolve_rank_mode(self.rank_mode))
        object.__setattr__(self, "ignore_neutrals", bool(self.ignore_neutrals))
        object.__setattr__(self, "locked_colors", _normalise_locks(self.locked_colors))

    def effective_locks(self) -> Tuple[HexStr, ...]:
        """Locked colours honoured this cycle: the earliest k."""
        return self.locked_colors[: self.k]


__all__ = ["RankMode", "RANK_MODES", "resolve_rank_mode", "SwatchConfig"]
