"""Position-based relaxation for sticks and particle overlaps.

Both solvers are Gauss-Seidel: constraints are visited one after another and
each correction is written back immediately, so later constraints in the same
pass see the already-moved positions. A point shared by several sticks is
therefore corrected several times per pass, in stick order.
"""
import numpy as np

from .geometry import safe_normalize
from .types import Stick


def relax_sticks(x: np.ndarray, pinned: np.ndarray, sticks: list[Stick]) -> int:
  """Run one relaxation pass over every stick, in place.

  Each stick is restored to its rest length around its current midpoint.
  A pinned endpoint stays where it is; the free endpoint is still placed half
  a rest length from the midpoint, so the error only halves for that stick.

  Returns:
    Number of sticks skipped because their endpoints coincide
  """
  skipped = 0
  for a, b, rest_length in sticks:
    center = (x[a] + x[b]) * 0.5
    direction = safe_normalize(x[a] - x[b])
    if direction is None:
      skipped += 1
      continue

    half_length = rest_length * 0.5
    if not pinned[a]:
      x[a] = center + direction * half_length
    if not pinned[b]:
      x[b] = center - direction * half_length
  return skipped


def resolve_overlaps(x: np.ndarray, radius: np.ndarray) -> int:
  """Push overlapping particles apart, in place.

  For every unordered pair closer than the sum of their radii, both particles
  move away from each other along the line through their centers by half of
  the penetration depth. Pairs with coincident centers are left alone.

  Returns:
    Number of pairs that were corrected
  """
  corrected = 0
  n_particles = x.shape[0]
  for i in range(n_particles):
    for j in range(i + 1, n_particles):
      delta = x[i] - x[j]
      dist_sq = float(delta[0] * delta[0] + delta[1] * delta[1])
      min_dist = float(radius[i] + radius[j])

      if 0.0 < dist_sq < min_dist * min_dist:
        dist = np.sqrt(dist_sq)
        push = delta * (0.5 * (min_dist - dist) / dist)
        x[i] += push
        x[j] -= push
        corrected += 1
  return corrected


def stick_errors(x: np.ndarray, sticks: list[Stick]) -> np.ndarray:
  """Absolute deviation of every stick from its rest length."""
  if not sticks:
    return np.zeros(0)
  ids = np.array([(a, b) for a, b, _ in sticks], dtype=np.int64)
  rest = np.array([length for _, _, length in sticks], dtype=np.float64)
  delta = x[ids[:, 0]] - x[ids[:, 1]]
  return np.abs(np.hypot(delta[:, 0], delta[:, 1]) - rest)


def total_overlap(x: np.ndarray, radius: np.ndarray) -> float:
  """Sum of penetration depths over all overlapping particle pairs."""
  if x.shape[0] < 2:
    return 0.0
  delta = x[:, None, :] - x[None, :, :]
  dist = np.hypot(delta[..., 0], delta[..., 1])
  penetration = radius[:, None] + radius[None, :] - dist
  upper = np.triu(np.ones_like(dist, dtype=bool), k=1)
  return float(np.sum(np.where(upper & (penetration > 0), penetration, 0.0)))
