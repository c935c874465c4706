"""Unit tests for the liquid particle engine."""
import pytest
import numpy as np
from dialphys.config import LiquidConfig
from dialphys.errors import ConfigurationError
from dialphys.particles import ParticleEngine


class TestLiquidSetup:

    def test_default_grid(self, liquid_engine):
        particles = liquid_engine.particles
        assert particles.shape == (24, 2)
        np.testing.assert_allclose(liquid_engine.radius, 8.0)
        np.testing.assert_allclose(particles[0], [30.0, 100.0])
        # Rows stack upwards, columns go right, spaced 2.2 radii apart
        np.testing.assert_allclose(particles[1], [30.0 + 17.6, 100.0])
        np.testing.assert_allclose(particles[6], [30.0, 100.0 - 17.6])
        np.testing.assert_array_equal(liquid_engine.v, 0.0)

    def test_grid_clamped(self):
        engine = ParticleEngine(200.0, 200.0)
        engine.initialize(rows=10, columns=20)
        assert engine.particles.shape == (24, 2)

    def test_custom_maxima(self):
        engine = ParticleEngine(200.0, 200.0, config=LiquidConfig(rows=3, columns=3))
        engine.initialize()
        assert engine.particles.shape == (9, 2)

    @pytest.mark.parametrize("radius", [0.0, -2.0])
    def test_non_positive_radius(self, radius):
        engine = ParticleEngine(200.0, 200.0)
        with pytest.raises(ConfigurationError):
            engine.initialize(radius=radius)
        with pytest.raises(ConfigurationError):
            engine.add_particle((100.0, 100.0), radius)


class TestParticleStep:

    def test_euler_step(self, particle_engine):
        particle_engine.add_particle((100.0, 100.0), 5.0, velocity=(60.0, 0.0))
        particle_engine.set_gravity(0.0, 0.01)  # 12 world units / s^2

        particle_engine.step()

        np.testing.assert_allclose(particle_engine.v[0], [60.0, 0.2])
        np.testing.assert_allclose(particle_engine.particles[0], [101.0, 100.0 + 0.2 / 60.0])

    def test_wall_clamp_leaves_velocity(self, particle_engine):
        particle_engine.add_particle((100.0, 195.0), 8.0, velocity=(0.0, 30.0))

        particle_engine.step()

        np.testing.assert_allclose(particle_engine.particles[0], [100.0, 182.0])
        np.testing.assert_allclose(particle_engine.v[0], [0.0, 30.0])

    def test_overlap_pair_separated(self, particle_engine):
        particle_engine.add_particle((97.0, 100.0), 5.0)
        particle_engine.add_particle((103.0, 100.0), 5.0)

        particle_engine.relax()

        p = particle_engine.particles
        assert np.linalg.norm(p[1] - p[0]) == pytest.approx(10.0)
        assert particle_engine.total_overlap() == pytest.approx(0.0, abs=1e-9)

    def test_coincident_particles_left_finite(self, particle_engine):
        particle_engine.add_particle((80.0, 80.0), 5.0)
        particle_engine.add_particle((80.0, 80.0), 5.0)

        particle_engine.step()

        assert np.all(np.isfinite(particle_engine.particles))
        np.testing.assert_array_equal(particle_engine.particles[0], particle_engine.particles[1])

    def test_dense_cluster_spreads_out(self, particle_engine):
        for i in range(3):
            for j in range(3):
                particle_engine.add_particle((96.0 + 4.0 * i, 96.0 + 4.0 * j), 8.0)
        initial = particle_engine.total_overlap()

        particle_engine.run_simulation(20)

        assert particle_engine.total_overlap() < initial * 0.5

    def test_pile_stays_inside(self, liquid_engine, radial_distances):
        liquid_engine.run_simulation(200)

        dist = radial_distances(liquid_engine, liquid_engine.particles)
        assert np.all(dist <= liquid_engine.bounds.radius + 1e-6)

    def test_set_gravity_is_idempotent(self, liquid_engine):
        liquid_engine.set_gravity(0.0, 1.0)
        liquid_engine.set_gravity(0.0, 1.0)
        np.testing.assert_allclose(liquid_engine.gravity, [0.0, 1200.0])


class TestRadialImpulse:

    def test_nearby_particles_pushed_away(self, particle_engine):
        particle_engine.add_particle((100.0, 100.0), 5.0)
        particle_engine.add_particle((120.0, 100.0), 5.0)
        particle_engine.add_particle((160.0, 100.0), 5.0)

        affected = particle_engine.apply_radial_impulse((90.0, 100.0))

        assert affected == 2
        np.testing.assert_allclose(particle_engine.v, [[1.0, 0.0], [3.0, 0.0], [0.0, 0.0]])

    def test_custom_radius_and_strength(self, particle_engine):
        particle_engine.add_particle((100.0, 110.0), 5.0)
        assert particle_engine.apply_radial_impulse((100.0, 100.0), radius=5.0) == 0
        assert particle_engine.apply_radial_impulse((100.0, 100.0), radius=20.0, strength=0.5) == 1
        np.testing.assert_allclose(particle_engine.v[0], [0.0, 5.0])

    def test_state_is_a_copy(self, liquid_engine):
        state = liquid_engine.get_state()
        state['v'][:] = 99.0
        np.testing.assert_array_equal(liquid_engine.v, 0.0)
        with pytest.raises(ValueError):
            liquid_engine.particles[0, 0] = 0.0
