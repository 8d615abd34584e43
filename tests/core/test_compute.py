"""
Tests for timing utilities and tolerance tiers.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.compute import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    EXACT,
    FP32,
    Timer,
    is_close,
    select_tolerance,
    timed,
)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('eliminate'):
            pass
        with timer.section('eliminate'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'eliminate'}
        assert result['eliminate'] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()['total_seconds'] >= 0.0


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestSelectTolerance:

    def test_exact_types(self):
        assert select_tolerance(int) is EXACT
        assert select_tolerance(Fraction) is EXACT

    def test_float(self):
        assert select_tolerance(float) is CPU_FP64
        assert select_tolerance(float, is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_single_precision(self):
        assert select_tolerance(np.float32) is FP32


class TestIsClose:

    def test_exact_requires_equality(self):
        assert is_close(Fraction(1, 3), Fraction(1, 3), EXACT)
        assert not is_close(1.0, 1.0 + 1e-15, EXACT)

    def test_fp64(self):
        assert is_close(1.0, 1.0 + 1e-13)
        assert not is_close(1.0, 1.001)

    def test_atol_near_zero(self):
        assert is_close(1e-14, 0.0, CPU_FP64)
