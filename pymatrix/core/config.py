"""
Process-wide engine configuration.

The configuration is an immutable dataclass that is replaced, never
mutated, so a reader always sees a consistent snapshot.

Usage:
    from pymatrix.core.config import config_context

    with config_context(sticky_compute=False):
        d = A.det()   # recomputed on every call inside the block
"""

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Iterator


@dataclass(frozen=True)
class EngineConfig:
    """
    Engine-wide settings.

    Attributes:
        sticky_compute: Memoize diagonal/determinant/inverse per matrix
        default_element_type: Callable used to build zero/one elements when
            a matrix is allocated without an explicit element type
        default_backend: Elimination backend used when callers pass 'auto'
    """
    sticky_compute: bool = True
    default_element_type: Callable[[Any], Any] = float
    default_backend: str = 'gauss_jordan'


_config = EngineConfig()


def get_config() -> EngineConfig:
    """Return the active configuration snapshot."""
    return _config


def set_config(**changes: Any) -> EngineConfig:
    """
    Replace the active configuration with selected fields changed.

    Args:
        **changes: Field names of EngineConfig and their new values

    Returns:
        The previous configuration, so callers can restore it

    Raises:
        ValueError: If an unknown field is named
    """
    global _config
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ValueError(f"Unknown configuration fields: {unknown}. Known: {sorted(known)}")
    previous = _config
    _config = replace(_config, **changes)
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[EngineConfig]:
    """
    Temporarily change configuration inside a with-block.

    Yields:
        The configuration active inside the block
    """
    global _config
    previous = set_config(**changes)
    try:
        yield _config
    finally:
        _config = previous
