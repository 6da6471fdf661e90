"""
Unit tests for SwatchConfig validation and rank mode resolution.
"""
import pytest

from swatches.config import SwatchConfig, resolve_rank_mode
from swatches.errors import InvalidConfigError, SwatchError


class TestSwatchConfig:
    """Configuration validation"""

    def test_defaults(self):
        cfg = SwatchConfig()
        assert cfg.k == 8
        assert cfg.rank_mode == "dominant"
        assert cfg.merge_threshold == 0
        assert cfg.locked_colors == ()
        assert cfg.max_iters == 10

    @pytest.mark.parametrize("k", [0, -3, 2.5, True])
    def test_rejects_bad_k(self, k):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(k=k)

    def test_large_k_accepted(self):
        """The core accepts any positive k, not just the UI range"""
        assert SwatchConfig(k=64).k == 64

    def test_rejects_negative_merge(self):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(merge_threshold=-1)

    def test_rejects_zero_iterations(self):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(max_iters=0)

    @pytest.mark.parametrize("value", [None, "18", True])
    def test_rejects_non_numeric_merge(self, value):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(merge_threshold=value)

    @pytest.mark.parametrize("value", [None, "3", 2.5, True])
    def test_rejects_non_integer_iterations(self, value):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(max_iters=value)

    def test_error_hierarchy(self):
        """Config errors are both SwatchError and ValueError"""
        with pytest.raises(ValueError):
            SwatchConfig(k=0)
        with pytest.raises(SwatchError):
            SwatchConfig(k=0)

    def test_locks_normalised_and_deduplicated(self):
        cfg = SwatchConfig(locked_colors=["#FF0000", "ff0000", "#00f", "#123456"])
        assert cfg.locked_colors == ("#ff0000", "#0000ff", "#123456")

    def test_set_locks_sorted(self):
        """Unordered input gets a fixed order before the earliest-k cap"""
        cfg = SwatchConfig(k=2, locked_colors={"#0000FF", "#ff0000", "#00ff00", "#00f"})
        assert cfg.locked_colors == ("#0000ff", "#00ff00", "#ff0000")
        assert cfg.effective_locks() == ("#0000ff", "#00ff00")

    def test_bad_lock_hex(self):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(locked_colors=["#12"])

    def test_lock_string_rejected(self):
        with pytest.raises(InvalidConfigError):
            SwatchConfig(locked_colors="#ff0000")

    def test_effective_locks_capped_to_k(self):
        """Earliest k locks are kept when more are supplied"""
        cfg = SwatchConfig(k=2, locked_colors=("#010101", "#020202", "#030303"))
        assert cfg.effective_locks() == ("#010101", "#020202")


class TestRankMode:
    """Rank mode names"""

    def test_case_insensitive(self):
        assert resolve_rank_mode("Dominant") == "dominant"
        assert resolve_rank_mode("VIBRANT") == "vibrant"
        assert SwatchConfig(rank_mode="Unique").rank_mode == "unique"

    def test_unknown(self):
        with pytest.raises(InvalidConfigError):
            resolve_rank_mode("loudest")
