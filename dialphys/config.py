"""Configuration classes for the watch-face simulations.

Constants that every engine shares live in `PhysicsConstants`; each scene has
its own scenario dataclass holding the layout parameters and the maxima that
entity counts are clamped to on a small display.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PhysicsConstants:
    """Physics engine constants."""
    TIME_STEP: float = 1.0 / 60.0
    BOUNDARY_MARGIN: float = 10.0
    POINT_MASS_ITERATIONS: int = 3
    PARTICLE_ITERATIONS: int = 2
    POINT_MASS_BOUNCE_DAMPING: float = 0.5
    POINT_MASS_GRAVITY_SCALE: float = 4.0
    PARTICLE_GRAVITY_SCALE: float = 1200.0
    RIGID_BODY_GRAVITY_SCALE: float = 800.0
    # Gravity before the first sensor reading arrives (already in world units)
    POINT_MASS_DEFAULT_GRAVITY: tuple[float, float] = (0.0, 1.0)
    PARTICLE_DEFAULT_GRAVITY: tuple[float, float] = (0.0, 9.8)
    RIGID_BODY_DEFAULT_GRAVITY: tuple[float, float] = (0.0, 9.8)


DEFAULT_CONSTANTS = PhysicsConstants()


@dataclass
class ChainConfig:
    """Hanging chain pinned at the top of the viewport."""
    segments: int = 10
    segment_length: float = 12.0
    max_segments: int = 12
    top_offset: float = 30.0
    hit_radius: float = 15.0

    @classmethod
    def from_args(cls, args) -> 'ChainConfig':
        """Create config from command-line arguments."""
        return cls(
            segments=args.count if args.count is not None else cls.segments,
            segment_length=args.size if args.size is not None else cls.segment_length,
        )


@dataclass
class RagdollConfig:
    """Six-point stick figure placed a third of the way down the viewport."""
    hit_radius: float = 20.0

    @classmethod
    def from_args(cls, args) -> 'RagdollConfig':
        return cls()


@dataclass
class LiquidConfig:
    """Grid of particles resting near the bottom of the world."""
    rows: int = 4
    columns: int = 6
    radius: float = 8.0
    max_rows: int = 4
    max_columns: int = 6
    spacing_factor: float = 2.2
    left_offset: float = 30.0
    bottom_offset: float = 100.0
    tap_radius: float = 50.0
    tap_strength: float = 0.1

    @classmethod
    def from_args(cls, args) -> 'LiquidConfig':
        """Create config from command-line arguments."""
        return cls(
            rows=args.rows if args.rows is not None else cls.rows,
            columns=args.count if args.count is not None else cls.columns,
            radius=args.size if args.size is not None else cls.radius,
        )


@dataclass
class RigidBodyConfig:
    """Row-column layout of alternating circles and boxes."""
    count: int = 6
    max_count: int = 8
    radius: float = 20.0
    row_spacing: float = 40.0
    columns: int = 3
    restitution: float = 0.7
    seed: Optional[int] = None
    colors: tuple[str, ...] = ("red", "green", "blue", "yellow", "orange", "purple")

    @classmethod
    def from_args(cls, args) -> 'RigidBodyConfig':
        """Create config from command-line arguments."""
        return cls(
            count=args.count if args.count is not None else cls.count,
            radius=args.size if args.size is not None else cls.radius,
            seed=args.seed,
        )
