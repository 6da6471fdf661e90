"""
Unit tests for palette ranking.
"""
import numpy as np
import pytest

from swatches.colour_convert import vibrancy
from swatches.core_types import Swatch
from swatches.errors import InvalidConfigError
from swatches.rank import rank_palette, uniqueness_scores


class TestDominant:
    """Count descending, stable"""

    def test_order_and_stability(self):
        a, b, c = Swatch(1, 1, 1, 5), Swatch(2, 2, 2, 10), Swatch(3, 3, 3, 5)
        assert rank_palette([a, b, c], "dominant") == [b, a, c]

    def test_mode_name_case(self):
        a, b = Swatch(1, 1, 1, 1), Swatch(2, 2, 2, 2)
        assert rank_palette([a, b], "Dominant") == [b, a]


class TestVibrant:
    """Saturation x value descending, count breaks ties"""

    def test_order(self):
        grey = Swatch(128, 128, 128, 100)
        red = Swatch(255, 0, 0, 1)
        dark_red = Swatch(128, 0, 0, 50)
        out = rank_palette([grey, red, dark_red], "vibrant")
        assert out == [red, dark_red, grey]
        scores = vibrancy(np.array([s.rgb for s in out], dtype=np.uint8))
        assert np.all(np.diff(scores) <= 0)

    def test_ties_by_count(self):
        few = Swatch(255, 0, 0, 3)
        many = Swatch(0, 255, 0, 7)
        assert rank_palette([few, many], "vibrant") == [many, few]


class TestUnique:
    """Nearest distance x ln(count + 1)"""

    def test_distinct_colour_first(self):
        black = Swatch(0, 0, 0, 10)
        near_black = Swatch(5, 5, 5, 10)
        white = Swatch(255, 255, 255, 1)
        out = rank_palette([black, near_black, white], "unique")
        assert out[0] == white

    def test_frequency_damps_rare_outlier(self):
        """A lone rare colour loses to a frequent, still distinct one"""
        base = Swatch(120, 120, 120, 400)
        neighbour = Swatch(120, 120, 190, 400)
        rare = Swatch(0, 0, 0, 1)
        scores = uniqueness_scores([base, neighbour, rare])
        assert scores[2] < scores[1]

    def test_scores_empty(self):
        assert uniqueness_scores([]).shape == (0,)


class TestRankContract:
    """Ranking only reorders"""

    @pytest.mark.parametrize("mode", ["dominant", "vibrant", "unique"])
    def test_same_members_and_locks(self, mode):
        colours = [
            Swatch(10, 20, 30, 4, locked=True),
            Swatch(200, 10, 10, 9),
            Swatch(40, 220, 90, 2, locked=True),
        ]
        out = rank_palette(colours, mode)
        assert sorted(out, key=lambda s: s.rgb) == sorted(colours, key=lambda s: s.rgb)

    def test_single_and_empty(self):
        s = Swatch(1, 2, 3, 4)
        assert rank_palette([s], "unique") == [s]
        assert rank_palette([], "vibrant") == []

    def test_unknown_mode(self):
        with pytest.raises(InvalidConfigError):
            rank_palette([Swatch(1, 1, 1, 1)], "random")
