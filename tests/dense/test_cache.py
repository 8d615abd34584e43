"""
Tests for the sticky-compute cache.

Validates:
    - diag/det/inv are memoized until the next write
    - Every write path (set, indexing, projections, row operations) clears
      the whole mask
    - Matrix-valued entries are handed out as copies
    - Failed computations store nothing
    - The cache can be disabled through configuration
"""

import pytest

from pymatrix import Matrix, config_context
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.dense.cache import CACHE_DET, CACHE_DIAG, CACHE_INV, StickyCache


# ═══════════════════════════════════════════════════════════════════════
# StickyCache unit behaviour
# ═══════════════════════════════════════════════════════════════════════


class TestStickyCache:

    def test_computes_once(self):
        cache = StickyCache()
        calls = []

        def compute():
            calls.append(1)
            return 42

        assert cache.get_or_compute(CACHE_DET, compute) == 42
        assert cache.get_or_compute(CACHE_DET, compute) == 42
        assert len(calls) == 1
        assert cache.mask == CACHE_DET

    def test_invalidate_clears_all_bits(self):
        cache = StickyCache()
        cache.get_or_compute(CACHE_DET, lambda: 1)
        cache.get_or_compute(CACHE_DIAG, lambda: 2)
        cache.invalidate()
        assert cache.mask == 0
        assert not cache.is_valid(CACHE_DET)

    def test_failed_compute_stores_nothing(self):
        cache = StickyCache()

        def compute():
            raise RuntimeError("failed")

        with pytest.raises(RuntimeError):
            cache.get_or_compute(CACHE_INV, compute)
        assert cache.mask == 0

    def test_value_straddling_invalidation_not_stored(self):
        cache = StickyCache()

        def compute():
            cache.invalidate()
            return 7

        assert cache.get_or_compute(CACHE_DET, compute) == 7
        assert not cache.is_valid(CACHE_DET)

    def test_repr_lists_valid_entries(self):
        cache = StickyCache()
        cache.get_or_compute(CACHE_DIAG, lambda: None)
        assert repr(cache) == "StickyCache(valid=['diag'])"


# ═══════════════════════════════════════════════════════════════════════
# Matrix integration
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixCache:

    def test_det_cached(self, square_2x2):
        square_2x2.det()
        assert square_2x2.cache.is_valid(CACHE_DET)

    def test_diag_cached(self, square_2x2):
        square_2x2.diag()
        assert square_2x2.cache.is_valid(CACHE_DIAG)

    def test_set_invalidates(self, square_2x2):
        square_2x2.det()
        square_2x2.set(0, 0, 5.0)
        assert square_2x2.cache.mask == 0
        assert square_2x2.det() == pytest.approx(14.0)

    def test_index_assignment_invalidates(self, square_2x2):
        assert square_2x2.trace() == 5.0
        square_2x2[1, 1] = 10.0
        assert square_2x2.trace() == 11.0

    def test_projection_write_invalidates(self, square_2x2):
        square_2x2.det()
        square_2x2.row(0)[1] = 0.0
        assert not square_2x2.cache.is_valid(CACHE_DET)
        assert square_2x2.det() == pytest.approx(4.0)

    def test_row_swap_invalidates(self, square_2x2):
        before = square_2x2.det()
        square_2x2.row_swap(0, 1)
        assert square_2x2.det() == pytest.approx(-before)

    def test_write_clears_every_bit(self, square_2x2):
        square_2x2.diag()
        square_2x2.det()
        square_2x2.inv()
        assert square_2x2.cache.mask == CACHE_DIAG | CACHE_DET | CACHE_INV
        square_2x2.set(1, 0, 3.0)
        assert square_2x2.cache.mask == 0

    def test_inverse_handed_out_as_copy(self, square_2x2):
        first = square_2x2.inv()
        first.set(0, 0, 1000.0)
        assert square_2x2.inv().at(0, 0) == pytest.approx(-2.0)

    def test_diag_handed_out_as_copy(self, square_2x2):
        d = square_2x2.diag()
        d.set(0, 99.0)
        assert square_2x2.diag().at(0) == 1.0

    def test_singular_inverse_not_cached(self, singular_2x2):
        with pytest.raises(SingularMatrixError):
            singular_2x2.inv()
        assert not singular_2x2.cache.is_valid(CACHE_INV)

    def test_reading_does_not_invalidate(self, square_2x2):
        square_2x2.det()
        square_2x2.at(0, 0)
        square_2x2.t().at(0, 1)
        assert square_2x2.cache.is_valid(CACHE_DET)

    def test_disabled_by_config(self, square_2x2):
        with config_context(sticky_compute=False):
            assert square_2x2.det() == pytest.approx(-2.0)
            assert square_2x2.cache.mask == 0

    def test_fresh_matrix_has_empty_cache(self):
        assert Matrix.from_rows([[1.0]]).cache.mask == 0
