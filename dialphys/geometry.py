"""Circular world geometry shared by every engine.

The simulated world is the round face of a watch: a circle centred in the
viewport whose radius is half the smaller viewport dimension minus a fixed
margin. All three engines compute their boundary through `world_bounds` so the
wall sits in exactly the same place in every scene.
"""
from typing import NamedTuple, Optional

import numpy as np

from .config import DEFAULT_CONSTANTS
from .errors import ConfigurationError, validate_positive_number


class WorldBounds(NamedTuple):
    """Immutable description of the circular boundary."""
    center: np.ndarray
    radius: float


def world_bounds(width: float, height: float,
                 margin: float = DEFAULT_CONSTANTS.BOUNDARY_MARGIN) -> WorldBounds:
    """Compute the circular boundary for a viewport.

    Args:
        width: Viewport width in drawing units
        height: Viewport height in drawing units
        margin: Distance kept between the boundary and the viewport edge

    Returns:
        WorldBounds with center (width/2, height/2) and radius
        min(width, height)/2 - margin

    Raises:
        ConfigurationError: If the viewport is empty or too small to leave a
            positive radius after the margin
    """
    validate_positive_number(width, "viewport width")
    validate_positive_number(height, "viewport height")

    center = np.array([width / 2.0, height / 2.0], dtype=np.float64)
    radius = min(width, height) / 2.0 - margin
    if radius <= 0:
        raise ConfigurationError(
            f"Viewport {width}x{height} leaves no room for a boundary with margin {margin}"
        )
    return WorldBounds(center=center, radius=float(radius))


def radial_offset(position: np.ndarray, bounds: WorldBounds) -> tuple[np.ndarray, float]:
    """Return the offset of `position` from the world center and its length."""
    offset = position - bounds.center
    return offset, float(np.hypot(offset[0], offset[1]))


def safe_normalize(vector: np.ndarray, length: Optional[float] = None) -> Optional[np.ndarray]:
    """Normalize a 2D vector, returning None for a zero-length input.

    Callers treat None as "skip this correction" so a degenerate direction
    never turns into NaN.

    Args:
        vector: Vector of shape (2,)
        length: Precomputed length of `vector`, if already known

    Returns:
        Unit vector of shape (2,) or None
    """
    if length is None:
        length = float(np.hypot(vector[0], vector[1]))
    if length == 0.0:
        return None
    return vector / length


def contains(bounds: WorldBounds, position: np.ndarray, tolerance: float = 1e-9) -> bool:
    """Check whether a point lies inside (or on) the boundary."""
    _, distance = radial_offset(np.asarray(position, dtype=np.float64), bounds)
    return distance <= bounds.radius + tolerance
