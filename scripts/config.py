"""Configuration classes for the headless runner."""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class SimulationConfig:
    """Configuration for a headless scene run."""
    scene: str
    steps: int
    width: float
    height: float
    gravity: Optional[tuple[float, float]] = None
    enable_profiling: bool = False
    collect_trajectory: bool = True

    @classmethod
    def from_args(cls, args) -> 'SimulationConfig':
        """Create config from command-line arguments."""
        gravity = None
        if args.gravity_x is not None or args.gravity_y is not None:
            gravity = (args.gravity_x or 0.0, args.gravity_y or 0.0)
        return cls(
            scene=args.scene,
            steps=args.steps,
            width=args.width,
            height=args.height,
            gravity=gravity,
            enable_profiling=args.profile,
            collect_trajectory=not args.no_trajectory
        )


@dataclass
class OutputConfig:
    """Configuration for output files."""
    trajectory_output: Optional[Path]
    metrics_output: Optional[Path] = None
    log_file: Optional[Path] = None
    verbose: bool = False

    @classmethod
    def from_args(cls, args) -> 'OutputConfig':
        """Create config from command-line arguments."""
        return cls(
            trajectory_output=Path(args.output) if args.output else None,
            metrics_output=Path(args.metrics_output) if args.metrics_output else None,
            log_file=Path(args.log_file) if args.log_file else None,
            verbose=args.verbose
        )
