"""
Unit tests for lock bookkeeping.
"""
from swatches.core_types import Swatch
from swatches.palette_lock import locked_hexes, locks_to_rgb, palette_set, reconcile_locks


class TestReconcileLocks:
    """Lock flags follow exact hex matches"""

    def test_flags_recomputed(self):
        palette = [Swatch(255, 0, 0, 3), Swatch(0, 0, 255, 2, locked=True), Swatch(0, 255, 0, 1)]
        out = reconcile_locks(palette, ["#FF0000"])
        assert [s.locked for s in out] == [True, False, False]
        assert [s.rgb for s in out] == [s.rgb for s in palette]

    def test_near_miss_not_locked(self):
        out = reconcile_locks([Swatch(255, 0, 1, 3)], ["#ff0000"])
        assert out[0].locked is False

    def test_input_untouched(self):
        palette = [Swatch(1, 2, 3, 1, locked=True)]
        reconcile_locks(palette, [])
        assert palette[0].locked is True


class TestLockHelpers:
    """Deriving lock sets from a palette"""

    def test_locked_hexes(self):
        palette = [
            Swatch(0, 0, 255, 2, locked=True),
            Swatch(255, 0, 0, 3),
            Swatch(0, 0, 255, 1, locked=True),
            Swatch(1, 2, 3, 1, locked=True),
        ]
        assert locked_hexes(palette) == ("#0000ff", "#010203")

    def test_locks_to_rgb(self):
        assert locks_to_rgb(["#ff0000", "00f"]) == [(255, 0, 0), (0, 0, 255)]

    def test_palette_set(self):
        assert palette_set([Swatch(1, 2, 3, 1), Swatch(1, 2, 3, 5)]) == {(1, 2, 3)}
