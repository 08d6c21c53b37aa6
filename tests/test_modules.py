"""
Unit tests for the module pool.

Tests FastUnit, DeepUnit and ModulePool activation arithmetic.
"""

import numpy as np
import pytest
from cognicortex.modules import DeepUnit, FastUnit, ModulePool


class TestInitialization:
    """Test pool initialization."""

    def test_unit_counts(self):
        """Test that initialize creates the requested units."""
        pool = ModulePool()
        pool.initialize(3, 2)

        assert pool.fast_count == 3
        assert pool.deep_count == 2
        assert [u.id for u in pool.fast_units] == [0, 1, 2]
        assert [u.id for u in pool.deep_units] == [0, 1]

    def test_units_start_zeroed(self):
        """Test fresh units have zero activation and fixed-size weights."""
        pool = ModulePool(fast_weight_size=16, deep_weight_size=32)
        pool.initialize(2, 2)

        for unit in pool.fast_units:
            assert unit.activation == 0.0
            assert unit.weights.shape == (16,)
        for unit in pool.deep_units:
            assert unit.activation == 0.0
            assert unit.weights.shape == (32,)
            assert unit.planning_depth == 5

    def test_reinitialize_replaces(self):
        """Test that repeated initialization resets rather than appends."""
        pool = ModulePool()
        pool.initialize(4, 4)
        pool.compute_fast_activations([1.0, 2.0], 0.0)
        pool.initialize(2, 1)

        assert pool.fast_count == 2
        assert pool.deep_count == 1
        assert all(u.activation == 0.0 for u in pool.fast_units)

    def test_zero_planning_depth_rejected(self):
        """Test that a non-positive planning depth is refused."""
        with pytest.raises(ValueError):
            ModulePool(planning_depth=0)
        with pytest.raises(ValueError):
            DeepUnit(id=0, weights=np.zeros(1), planning_depth=0)


class TestFastActivations:
    """Test fast-tier activation."""

    def test_reference_scenario(self):
        """Test mean(s) * (i+1)/10 with no personality influence."""
        pool = ModulePool()
        pool.initialize(3, 2)

        fast = pool.compute_fast_activations([1.0, 2.0, 3.0], 0.0)

        assert np.allclose(fast, [0.2, 0.4, 0.6])

    def test_personality_influence_scales(self):
        """Test the (1 + 0.2 * influence) factor."""
        pool = ModulePool()
        pool.initialize(2, 0)

        fast = pool.compute_fast_activations([1.0], 0.5)

        assert np.allclose(fast, [0.1 * 1.1, 0.2 * 1.1])

    def test_empty_sensory_is_zero(self):
        """Test that empty sensory input yields zero activations."""
        pool = ModulePool()
        pool.initialize(2, 0)

        fast = pool.compute_fast_activations([], 0.3)

        assert np.allclose(fast, [0.0, 0.0])
        assert np.all(np.isfinite(fast))

    def test_activations_stored_on_units(self):
        """Test each unit keeps its latest activation."""
        pool = ModulePool()
        pool.initialize(3, 0)

        fast = pool.compute_fast_activations([2.0], 0.0)
        stored, _ = pool.get_activations()

        assert np.allclose(stored, fast)

    def test_no_units(self):
        """Test an empty pool returns an empty array."""
        pool = ModulePool()

        fast = pool.compute_fast_activations([1.0, 2.0], 0.0)

        assert fast.shape == (0,)


class TestDeepActivations:
    """Test deep-tier activation."""

    def test_reference_scenario(self):
        """Test (Σ fast / depth) * (i+1)/5 * modifier."""
        pool = ModulePool()
        pool.initialize(3, 2)

        deep = pool.compute_deep_activations([0.2, 0.4, 0.6], 1.0)

        assert np.allclose(deep, [0.048, 0.096])

    def test_emotional_modifier_scales(self):
        """Test the emotional modifier multiplies every deep activation."""
        pool = ModulePool()
        pool.initialize(0, 3)

        base = pool.compute_deep_activations([1.0], 1.0)
        scaled = pool.compute_deep_activations([1.0], 1.05)

        assert np.allclose(scaled, base * 1.05)

    def test_planning_depth_divides(self):
        """Test a custom planning depth is used as divisor."""
        pool = ModulePool(planning_depth=2)
        pool.initialize(0, 1)

        deep = pool.compute_deep_activations([1.0, 1.0], 1.0)

        assert np.allclose(deep, [2.0 / 2 * 1 / 5])

    def test_empty_fast_input(self):
        """Test that no fast activations yields zero deep activations."""
        pool = ModulePool()
        pool.initialize(0, 2)

        deep = pool.compute_deep_activations([], 1.0)

        assert np.allclose(deep, [0.0, 0.0])


class TestOverflow:
    """Test activations that exceed the float range."""

    def test_fast_overflow_zeroed(self):
        """Test fast entries past the float range are stored as 0."""
        pool = ModulePool()
        pool.initialize(100, 0)

        fast = pool.compute_fast_activations([1e308], 0.0)

        assert np.all(np.isfinite(fast))
        assert np.isclose(fast[0], 1e307)
        assert fast[-1] == 0.0
        assert pool.fast_units[-1].activation == 0.0

    def test_deep_overflow_zeroed(self):
        """Test an overflowing fast-tier sum gives zero deep activations."""
        pool = ModulePool()
        pool.initialize(0, 2)

        deep = pool.compute_deep_activations([1.5e308, 1.5e308], 1.0)

        assert deep.tolist() == [0.0, 0.0]
        assert [u.activation for u in pool.deep_units] == [0.0, 0.0]
