"""
Tolerance tiers for numerical comparison.

Defines precision expectations for different element types and compute
paths:
- EXACT: rational/integer elements, results must match exactly
- CPU_FP64: double precision elimination
- CPU_FP64_ILL_CONDITIONED: double precision, ill-conditioned input
- FP32: single precision elements (e.g. numpy.float32)

Used by allclose(), the test suite, and the LAPACK cross-checks.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic (int, Fraction), results compare equal',
)

CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision elimination on well-conditioned input',
)

# cond(A) > 1e4
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision elements',
)


def select_tolerance(
    element_type: Any,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select the tolerance tier appropriate for an element type."""
    type_name = getattr(element_type, '__name__', str(element_type))
    if type_name in ('int', 'Fraction'):
        return EXACT
    if '32' in type_name or '16' in type_name:
        return FP32
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64


def is_close(a: Any, b: Any, tier: ToleranceTier = CPU_FP64) -> bool:
    """
    Check if two scalars are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|
    """
    if tier.rtol == 0.0 and tier.atol == 0.0:
        return a == b
    return abs(a - b) <= tier.atol + tier.rtol * abs(b)
