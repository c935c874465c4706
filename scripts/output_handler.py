"""Output handling module for simulation results."""
from typing import Dict, Any
from pathlib import Path
import sys


class SimulationOutputHandler:
    """Handles all output operations for simulation results."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def print_simulation_start(self, scene: str, steps: int,
                               collect_trajectory: bool) -> None:
        """Print simulation start message.

        Args:
            scene: Scene name
            steps: Number of steps
            collect_trajectory: Whether every frame is being kept
        """
        if not self.verbose:
            return

        print(f"Running {scene} scene for {steps} steps...")
        if not collect_trajectory:
            print("Trajectory collection disabled - only the final state is kept")

    def print_simulation_complete(self, metrics: Dict[str, Any]) -> None:
        """Print simulation completion summary."""
        if not self.verbose:
            return

        print("\nSimulation Complete!")
        print(f"Entities: {metrics['num_entities']}")
        print(f"Total time: {metrics['total_time']:.3f} seconds")
        print(f"Steps per second: {metrics['steps_per_second']:.1f}")
        print(f"Max distance from center: {metrics['max_radial_distance']:.2f} "
              f"(boundary radius {metrics['boundary_radius']:.2f})")

    def print_profiling_data(self, profile_data: Dict[str, Any]) -> None:
        if not self.verbose or not profile_data:
            return

        print("\nProfiling data:")
        for key, value in profile_data.items():
            print(f"  {key}: {value}")

    def print_trajectory_saved(self, output_path: Path) -> None:
        if not self.verbose:
            return

        print(f"\nTrajectory saved to: {output_path}")

    def print_error(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)
