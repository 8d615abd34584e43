"""
Fill-mode constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for fill selectors.
Import from here, never use raw strings.

Usage:
    from pymatrix.core.fill import FILL_IDENTITY
    from pymatrix import allocate

    I = allocate(3, 3, FILL_IDENTITY)
"""

from typing import Any

from pymatrix.core.exceptions import UnknownFillModeError

# Every element set to zero
FILL_ZEROS = 'zeros'

# Every element set to one
FILL_ONES = 'ones'

# Ones on the leading diagonal of the largest top-left square, zeros elsewhere
FILL_IDENTITY = 'identity'

# Independent draws from a uniform distribution on [low, high)
FILL_RANDOM = 'random'

# Every element set to a caller-supplied value
FILL_VALUE = 'value'

# All fill modes as a frozenset for validation
ALL_FILL_MODES = frozenset({
    FILL_ZEROS,
    FILL_ONES,
    FILL_IDENTITY,
    FILL_RANDOM,
    FILL_VALUE,
})


def check_fill_mode(mode: Any) -> str:
    """
    Validate a fill selector.

    Raises:
        UnknownFillModeError: If mode is not one of ALL_FILL_MODES
    """
    if not isinstance(mode, str) or mode not in ALL_FILL_MODES:
        raise UnknownFillModeError(
            f"fill: unknown mode {mode!r}, expected one of {sorted(ALL_FILL_MODES)}"
        )
    return mode


__all__ = [
    'FILL_ZEROS',
    'FILL_ONES',
    'FILL_IDENTITY',
    'FILL_RANDOM',
    'FILL_VALUE',
    'ALL_FILL_MODES',
    'check_fill_mode',
]
