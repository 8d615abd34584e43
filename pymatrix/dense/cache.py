"""
Sticky-compute cache.

Per-matrix memoization of expensive derived quantities. A quantity is
served from the cache only if it was computed after the most recent
mutation of its owner; every write clears the entire mask.
"""

from typing import Any, Callable

from pymatrix.core.config import get_config

CACHE_DIAG = 1 << 0
CACHE_DET = 1 << 1
CACHE_INV = 1 << 2

CACHE_NAMES = {
    CACHE_DIAG: 'diag',
    CACHE_DET: 'det',
    CACHE_INV: 'inv',
}


class StickyCache:
    """
    Bitmask of valid derived quantities plus their stored values.

    The generation counter advances on every invalidation. A value whose
    computation straddled an invalidation is returned to the caller but
    never stored, so a set bit always means "computed after the last write".
    """

    __slots__ = ('_mask', '_values', '_generation')

    def __init__(self) -> None:
        self._mask = 0
        self._values: dict[int, Any] = {}
        self._generation = 0

    @property
    def mask(self) -> int:
        return self._mask

    def is_valid(self, bit: int) -> bool:
        return (self._mask & bit) != 0

    def get_or_compute(self, bit: int, compute: Callable[[], Any]) -> Any:
        """
        Return the cached value for bit, computing and storing it if needed.

        Exceptions raised by compute propagate and leave the cache untouched.
        """
        if not get_config().sticky_compute:
            return compute()
        if self._mask & bit:
            return self._values[bit]
        generation = self._generation
        value = compute()
        if generation == self._generation:
            self._values[bit] = value
            self._mask |= bit
        return value

    def invalidate(self) -> None:
        """Clear every bit regardless of which quantity a write affects."""
        self._mask = 0
        self._values.clear()
        self._generation += 1

    def __repr__(self) -> str:
        valid = [name for bit, name in CACHE_NAMES.items() if self._mask & bit]
        return f"StickyCache(valid={valid})"
