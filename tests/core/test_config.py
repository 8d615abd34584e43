"""
Tests for engine configuration.
"""

from dataclasses import FrozenInstanceError
from fractions import Fraction

import pytest

from pymatrix import allocate, FILL_ZEROS
from pymatrix.core.config import EngineConfig, config_context, get_config, set_config


class TestDefaults:

    def test_default_values(self):
        config = get_config()
        assert config.sticky_compute is True
        assert config.default_element_type is float
        assert config.default_backend == 'gauss_jordan'

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            get_config().sticky_compute = False


class TestSetConfig:

    def test_returns_previous(self):
        previous = set_config(sticky_compute=False)
        assert previous.sticky_compute is True
        assert get_config().sticky_compute is False

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown configuration fields"):
            set_config(precision='high')

    def test_unknown_field_leaves_config_unchanged(self):
        before = get_config()
        with pytest.raises(ValueError):
            set_config(sticky_compute=False, bogus=1)
        assert get_config() is before


class TestConfigContext:

    def test_scoped_change(self):
        with config_context(default_backend='lapack') as config:
            assert config.default_backend == 'lapack'
            assert get_config().default_backend == 'lapack'
        assert get_config().default_backend == 'gauss_jordan'

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with config_context(sticky_compute=False):
                raise RuntimeError("boom")
        assert get_config().sticky_compute is True

    def test_default_element_type_used_by_allocation(self):
        with config_context(default_element_type=Fraction):
            m = allocate(2, 2, FILL_ZEROS)
        assert m.element_type is Fraction
        assert isinstance(m.at(0, 0), Fraction)

    def test_equality_of_snapshots(self):
        assert EngineConfig() == get_config()
