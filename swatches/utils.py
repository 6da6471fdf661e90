from __future__ import annotations

"""
Shared utilities for swatches.

Includes time formatting, palette usage reports for display, and tidy
line-oriented logging used by the engine (debug only) and the CLI.
"""

import sys
from typing import Any, Iterable, List, Sequence, Tuple

from .core_types import HexStr, Swatch


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


# Palette reports


def palette_report(
    palette: Sequence[Swatch],
) -> List[Tuple[HexStr, int, float, bool]]:
    """
    Display rows for a palette, in palette order.

    Returns a list of (hex, count, share, locked). Share is relative to the
    summed counts of the palette itself.
    """
    total = sum(s.count for s in palette)
    return [
        (s.hex, s.count, (s.count / total) if total else 0.0, s.locked)
        for s in palette
    ]


def format_swatch_line(index: int, hex_code: HexStr, count: int, share: float, locked: bool) -> str:
    """One aligned palette line, e.g. ' 1. #ff0000  pixels=1,000  share=50.0%  [locked]'."""
    mark = "  [locked]" if locked else ""
    return f"{index:>2}. {hex_code}  pixels={count:,}  share={share:.1%}{mark}"


# Pretty logging


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [palette] K: 8  Mode: dominant  Neutrals: off  Merge: 18  Locks: 2
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "palette_report",
    "format_swatch_line",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
