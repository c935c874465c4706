"""Circular boundary handling.

Three policies share the same radial clamp and differ in what happens to the
motion afterwards:

- `bounce_points`: point masses are put back on the boundary and their
  previous position is rebuilt so the implied velocity is reflected about the
  wall normal and damped.
- `clamp_particles`: particles are put back so their whole disc is inside;
  velocity is left alone.
- `reflect_bodies`: rigid bodies are put back inside and their velocity is
  reflected and scaled by each body's restitution.

Entities sitting exactly on the world center have no radial direction and are
skipped. Every function updates its arrays in place.
"""
import numpy as np

from .geometry import WorldBounds


def _radial(x: np.ndarray, bounds: WorldBounds) -> tuple[np.ndarray, np.ndarray]:
    offset = x - bounds.center
    distance = np.hypot(offset[:, 0], offset[:, 1])
    return offset, distance


def bounce_points(x: np.ndarray, x_prev: np.ndarray, pinned: np.ndarray,
                  bounds: WorldBounds, damping: float) -> int:
    """Contain point masses inside the boundary with a damped bounce.

    Returns:
        Number of points that were clamped
    """
    offset, distance = _radial(x, bounds)
    outside = (distance > bounds.radius) & (distance > 0.0) & ~pinned
    if not outside.any():
        return 0

    normal = offset[outside] / distance[outside, None]
    velocity = x[outside] - x_prev[outside]
    clamped = bounds.center + normal * bounds.radius

    along_normal = np.sum(velocity * normal, axis=1, keepdims=True)
    reflected = velocity - 2.0 * along_normal * normal

    x[outside] = clamped
    x_prev[outside] = clamped - reflected * damping
    return int(outside.sum())


def clamp_particles(x: np.ndarray, radius: np.ndarray, bounds: WorldBounds) -> int:
    """Keep particle discs inside the boundary without touching velocity.

    Returns:
        Number of particles that were clamped
    """
    offset, distance = _radial(x, bounds)
    outside = (distance + radius > bounds.radius) & (distance > 0.0)
    if not outside.any():
        return 0

    normal = offset[outside] / distance[outside, None]
    allowed = np.maximum(bounds.radius - radius[outside], 0.0)
    x[outside] = bounds.center + normal * allowed[:, None]
    return int(outside.sum())


def reflect_bodies(x: np.ndarray, v: np.ndarray, radius: np.ndarray,
                   restitution: np.ndarray, bounds: WorldBounds) -> np.ndarray:
    """Keep rigid bodies inside the boundary and reflect their velocity.

    Returns:
        Boolean mask (N,) of bodies that touched the boundary
    """
    offset, distance = _radial(x, bounds)
    hit = (distance + radius > bounds.radius) & (distance > 0.0)
    if not hit.any():
        return hit

    normal = offset[hit] / distance[hit, None]
    allowed = np.maximum(bounds.radius - radius[hit], 0.0)
    x[hit] = bounds.center + normal * allowed[:, None]

    velocity = v[hit]
    along_normal = np.sum(velocity * normal, axis=1, keepdims=True)
    v[hit] = (velocity - 2.0 * along_normal * normal) * restitution[hit, None]
    return hit
