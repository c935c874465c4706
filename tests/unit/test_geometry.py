"""Unit tests for the shared circular world geometry."""
import pytest
import numpy as np
from dialphys.errors import ConfigurationError
from dialphys.geometry import WorldBounds, contains, radial_offset, safe_normalize, world_bounds
from dialphys.particles import ParticleEngine
from dialphys.point_mass import ChainEngine
from dialphys.rigid_body import RigidBodyEngine


class TestWorldBounds:
    """Test suite for the boundary computation."""

    def test_square_viewport(self):
        bounds = world_bounds(200.0, 200.0)
        np.testing.assert_allclose(bounds.center, [100.0, 100.0])
        assert bounds.radius == pytest.approx(90.0)

    def test_uses_smaller_dimension(self):
        """A portrait viewport takes its radius from the width."""
        bounds = world_bounds(180.0, 300.0)
        np.testing.assert_allclose(bounds.center, [90.0, 150.0])
        assert bounds.radius == pytest.approx(80.0)

    def test_custom_margin(self):
        bounds = world_bounds(100.0, 100.0, margin=0.0)
        assert bounds.radius == pytest.approx(50.0)

    @pytest.mark.parametrize("width,height", [(0.0, 100.0), (100.0, -5.0), (20.0, 20.0), (15.0, 400.0)])
    def test_rejects_degenerate_viewports(self, width, height):
        with pytest.raises(ConfigurationError):
            world_bounds(width, height)

    def test_identical_for_every_engine(self):
        """All engines see the same wall for the same viewport."""
        engines = [ChainEngine(240.0, 200.0), ParticleEngine(240.0, 200.0), RigidBodyEngine(240.0, 200.0)]
        reference = world_bounds(240.0, 200.0)
        for engine in engines:
            np.testing.assert_array_equal(engine.bounds.center, reference.center)
            assert engine.bounds.radius == reference.radius


class TestVectorHelpers:

    def test_safe_normalize(self):
        unit = safe_normalize(np.array([3.0, 4.0]))
        np.testing.assert_allclose(unit, [0.6, 0.8])

    def test_safe_normalize_zero_vector(self):
        assert safe_normalize(np.zeros(2)) is None
        assert safe_normalize(np.array([1.0, 0.0]), length=0.0) is None

    def test_radial_offset(self):
        bounds = WorldBounds(center=np.array([10.0, 10.0]), radius=5.0)
        offset, distance = radial_offset(np.array([13.0, 14.0]), bounds)
        np.testing.assert_allclose(offset, [3.0, 4.0])
        assert distance == pytest.approx(5.0)

    def test_contains(self):
        bounds = world_bounds(200.0, 200.0)
        assert contains(bounds, [100.0, 190.0])
        assert not contains(bounds, [100.0, 190.5])
