"""Simulation runner for the watch-face engines.

Separates concerns: trajectory collection, step profiling and metrics.
"""
import time
import logging
import numpy as np
from typing import Dict, List, Optional, Tuple, Any
from dataclasses import dataclass

from dialphys.engine import SimulationEngine

logger = logging.getLogger(__name__)


@dataclass
class SimulationMetrics:
    """Encapsulates simulation performance metrics."""
    total_time: float
    steps_per_second: float
    scene: str
    num_steps: int
    num_entities: int
    max_radial_distance: float
    boundary_radius: float
    trajectory_collected: bool
    profile_data: Optional[Dict[str, float]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary format."""
        result = {
            'total_time': self.total_time,
            'steps_per_second': self.steps_per_second,
            'scene': self.scene,
            'num_steps': self.num_steps,
            'num_entities': self.num_entities,
            'max_radial_distance': self.max_radial_distance,
            'boundary_radius': self.boundary_radius,
            'trajectory_collected': self.trajectory_collected
        }
        if self.profile_data:
            result['profile_data'] = self.profile_data
        return result


class TrajectoryCollector:
    """Manages trajectory collection during simulation."""

    def __init__(self, collect: bool = True):
        self.collect = collect
        self.trajectory: Optional[List[np.ndarray]] = [] if collect else None

    def add_frame(self, positions: np.ndarray) -> None:
        if self.collect:
            self.trajectory.append(positions.copy())

    def get_result(self, final_positions: np.ndarray) -> np.ndarray:
        """Get the collected trajectory or final positions.

        Returns:
            Array of shape (frames, entities, 2) when collecting, otherwise
            the final positions of shape (entities, 2)
        """
        if self.collect:
            result = np.stack(self.trajectory)
            logger.debug(f"Collected trajectory shape: {result.shape}")
            return result
        return final_positions


class SimulationProfiler:
    """Handles performance profiling of simulation steps."""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.step_times: Optional[List[float]] = [] if enabled else None

    def record_step_time(self, duration: float) -> None:
        if self.enabled:
            self.step_times.append(duration)

    def get_profile_data(self) -> Optional[Dict[str, float]]:
        if not self.enabled or not self.step_times:
            return None

        return {
            'avg_step_time': float(np.mean(self.step_times)),
            'min_step_time': float(np.min(self.step_times)),
            'max_step_time': float(np.max(self.step_times)),
            'std_step_time': float(np.std(self.step_times))
        }


class SimulationRunner:
    """Steps an engine for a fixed number of ticks and records the result."""

    def __init__(self, engine: SimulationEngine, scene: str, steps: int,
                 enable_profiling: bool = False, collect_trajectory: bool = True):
        """Initialize the simulation runner.

        Args:
            engine: An initialized engine
            scene: Scene name, reported in the metrics
            steps: Number of simulation steps to execute
            enable_profiling: Whether to collect per-step timing
            collect_trajectory: Whether to keep every frame or only the last
        """
        self.engine = engine
        self.scene = scene
        self.steps = steps
        self.trajectory_collector = TrajectoryCollector(collect_trajectory)
        self.profiler = SimulationProfiler(enable_profiling)

    def run(self) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Execute the simulation.

        Returns:
            Tuple of (trajectory_or_final_positions, metrics_dict)
        """
        self.trajectory_collector.add_frame(self.engine.entity_positions())

        start_time = time.time()
        for _ in range(self.steps):
            step_start = time.time()
            self.engine.step()
            self.profiler.record_step_time(time.time() - step_start)
            self.trajectory_collector.add_frame(self.engine.entity_positions())
        total_time = time.time() - start_time

        final_positions = self.engine.entity_positions()
        result_data = self.trajectory_collector.get_result(final_positions)
        return result_data, self._build_metrics(total_time, final_positions).to_dict()

    def _build_metrics(self, total_time: float, final_positions: np.ndarray) -> SimulationMetrics:
        bounds = self.engine.bounds
        offsets = final_positions - bounds.center
        distances = np.hypot(offsets[:, 0], offsets[:, 1]) if len(offsets) else np.zeros(1)

        return SimulationMetrics(
            total_time=total_time,
            steps_per_second=self.steps / total_time if total_time > 0 else float('inf'),
            scene=self.scene,
            num_steps=self.steps,
            num_entities=int(final_positions.shape[0]),
            max_radial_distance=float(distances.max()),
            boundary_radius=bounds.radius,
            trajectory_collected=self.trajectory_collector.collect,
            profile_data=self.profiler.get_profile_data()
        )
