# swatches/errors.py
"""
Exception taxonomy.

Only two conditions abort palette generation:
  EmptyInputError    : no pixel samples were supplied
  InvalidConfigError : configuration rejected (k <= 0, negative merge, bad hex)

Everything else (empty clusters, an all-neutral pool, a short merge result)
is recovered inside the engine.
"""


class SwatchError(Exception):
    """Base class for palette generation failures."""


class EmptyInputError(SwatchError, ValueError):
    """No pixels to cluster."""


class InvalidConfigError(SwatchError, ValueError):
    """Configuration value out of range or malformed."""


__all__ = ["SwatchError", "EmptyInputError", "InvalidConfigError"]
