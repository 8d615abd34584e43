"""
Shared compute infrastructure for PyMatrix.

This module provides timing utilities and tolerance tiers shared by all
backends and by the test suite.

IMPORTANT: This is NOT where elimination backends live. Those go in
linalg/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and scalar closeness
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    FP32,
    select_tolerance,
    is_close,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "FP32",
    "select_tolerance",
    "is_close",
]
