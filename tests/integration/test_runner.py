"""Integration tests for the headless simulation runner."""
import pytest
import numpy as np
from scripts.run_simulation import SimulationProfiler, SimulationRunner, TrajectoryCollector
from scripts.scene_builder import create_engine


class TestSimulationRunner:

    def test_trajectory_shape(self):
        engine = create_engine("ragdoll", 200.0, 200.0)
        runner = SimulationRunner(engine, scene="ragdoll", steps=15)

        trajectory, metrics = runner.run()

        assert trajectory.shape == (16, 6, 2)
        np.testing.assert_allclose(trajectory[-1], engine.entity_positions())
        assert metrics['scene'] == "ragdoll"
        assert metrics['num_steps'] == 15
        assert metrics['num_entities'] == 6
        assert metrics['trajectory_collected'] is True
        assert 'profile_data' not in metrics

    def test_final_state_only(self):
        engine = create_engine("liquid", 200.0, 200.0)
        result, metrics = SimulationRunner(engine, "liquid", 5, collect_trajectory=False).run()
        assert result.shape == (24, 2)
        assert metrics['trajectory_collected'] is False
        assert metrics['max_radial_distance'] <= metrics['boundary_radius'] + 1e-6

    def test_profiling(self):
        engine = create_engine("bodies", 200.0, 200.0)
        _, metrics = SimulationRunner(engine, "bodies", 10, enable_profiling=True).run()

        profile = metrics['profile_data']
        assert set(profile) == {'avg_step_time', 'min_step_time', 'max_step_time', 'std_step_time'}
        assert profile['min_step_time'] <= profile['avg_step_time'] <= profile['max_step_time']

    def test_empty_scene(self):
        engine = create_engine("chain", 200.0, 200.0)
        engine.initialize(segments=0)
        trajectory, metrics = SimulationRunner(engine, "chain", 3).run()
        assert trajectory.shape == (4, 0, 2)
        assert metrics['num_entities'] == 0


class TestHelpers:

    def test_collector_copies_frames(self):
        collector = TrajectoryCollector(collect=True)
        frame = np.zeros((2, 2))
        collector.add_frame(frame)
        frame[:] = 1.0
        np.testing.assert_array_equal(collector.get_result(frame)[0], 0.0)

    def test_disabled_profiler(self):
        profiler = SimulationProfiler(enabled=False)
        profiler.record_step_time(0.1)
        assert profiler.get_profile_data() is None
