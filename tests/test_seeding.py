"""
Unit tests for centroid seeding.
"""
import numpy as np
import pytest

from swatches.errors import EmptyInputError
from swatches.seeding import seed_centroids


@pytest.fixture
def pool():
    return np.array([[i * 20, 0, 255 - i * 20] for i in range(10)], dtype=np.uint8)


class TestSeedCentroids:
    """Locked-first seeding from a shuffled pool"""

    def test_empty_pool(self, rng):
        with pytest.raises(EmptyInputError):
            seed_centroids(np.zeros((0, 3), dtype=np.uint8), 3, [], rng)

    def test_locked_first(self, pool, rng):
        locks = [(1, 2, 3), (4, 5, 6)]
        centres, mask = seed_centroids(pool, 4, locks, rng)
        assert centres.shape == (4, 3)
        np.testing.assert_array_equal(centres[:2], locks)
        np.testing.assert_array_equal(mask, [True, True, False, False])

    def test_unlocked_rows_come_from_pool(self, pool, rng):
        centres, _ = seed_centroids(pool, 6, [], rng)
        pool_rows = {tuple(r) for r in pool.tolist()}
        assert all(tuple(r) in pool_rows for r in centres.tolist())
        # no repeats while k <= pool size
        assert len({tuple(r) for r in centres.tolist()}) == 6

    def test_wraps_when_k_exceeds_pool(self, rng):
        small = np.array([[0, 0, 0], [255, 255, 255]], dtype=np.uint8)
        centres, mask = seed_centroids(small, 5, [], rng)
        assert centres.shape == (5, 3)
        assert not mask.any()
        np.testing.assert_array_equal(centres[0], centres[2])
        np.testing.assert_array_equal(centres[1], centres[3])

    def test_more_locks_than_k(self, pool, rng):
        """Seeding itself never drops locks; capping is the config's job"""
        locks = [(1, 1, 1), (2, 2, 2), (3, 3, 3)]
        centres, mask = seed_centroids(pool, 1, locks, rng)
        assert centres.shape == (3, 3)
        assert mask.all()

    def test_same_seed_same_centres(self, pool):
        a, _ = seed_centroids(pool, 5, [], np.random.default_rng(7))
        b, _ = seed_centroids(pool, 5, [], np.random.default_rng(7))
        np.testing.assert_array_equal(a, b)
