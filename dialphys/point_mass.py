"""Verlet point masses joined by fixed-length sticks.

Backs the hanging chain and the ragdoll scenes. Points live in flat arrays
(`x`, `x_prev`, `pinned`) and sticks refer to them by index, so a point shared
by several sticks is a single slot that every stick reads and writes in turn.
"""
import logging
from typing import Optional

import numpy as np

from .boundary import bounce_points
from .config import ChainConfig, PhysicsConstants, RagdollConfig, DEFAULT_CONSTANTS
from .engine import SimulationEngine, clamp_count
from .integration import verlet_integrate
from .solver import relax_sticks, stick_errors
from .types import RagdollJoint, Stick, as_vec2, create_point_data, read_only

logger = logging.getLogger(__name__)


class PointMassEngine(SimulationEngine):

  def __init__(self, width: float, height: float, hit_radius: float = 15.0,
               constants: PhysicsConstants = DEFAULT_CONSTANTS):
    super().__init__(width, height,
                     gravity_scale=constants.POINT_MASS_GRAVITY_SCALE,
                     default_gravity=constants.POINT_MASS_DEFAULT_GRAVITY,
                     constants=constants)
    self.hit_radius = hit_radius
    self.iterations = constants.POINT_MASS_ITERATIONS
    self.damping = constants.POINT_MASS_BOUNCE_DAMPING
    self.reset()

  def reset(self) -> None:
    data = create_point_data([], [])
    self.x = data['x']
    self.x_prev = data['x_prev']
    self.pinned = data['pinned']
    self._sticks: list[Stick] = []

  def load_points(self, positions: list[np.ndarray], pinned: list[bool]) -> None:
    data = create_point_data([as_vec2(p) for p in positions], pinned)
    self.x = data['x']
    self.x_prev = data['x_prev']
    self.pinned = data['pinned']
    self._sticks = []

  def add_point(self, position, pinned: bool = False) -> int:
    pos = as_vec2(position).reshape(1, 2)
    self.x = np.vstack([self.x, pos])
    self.x_prev = np.vstack([self.x_prev, pos])
    self.pinned = np.append(self.pinned, bool(pinned))
    return self.x.shape[0] - 1

  def add_stick(self, point_a: int, point_b: int) -> int:
    # Rest length is captured once, from the distance at creation time
    delta = self.x[point_a] - self.x[point_b]
    self._sticks.append(Stick(int(point_a), int(point_b), float(np.hypot(delta[0], delta[1]))))
    return len(self._sticks) - 1

  @property
  def points(self) -> np.ndarray:
    return read_only(self.x)

  @property
  def sticks(self) -> tuple[Stick, ...]:
    return tuple(self._sticks)

  @property
  def stick_ids(self) -> np.ndarray:
    return np.array([(s.point_a, s.point_b) for s in self._sticks], dtype=np.int64).reshape(-1, 2)

  def step(self) -> None:
    self.x, self.x_prev = verlet_integrate(self.x, self.x_prev, self.pinned, self.gravity, self.dt)
    for _ in range(self.iterations):
      relax_sticks(self.x, self.pinned, self._sticks)
      bounce_points(self.x, self.x_prev, self.pinned, self.bounds, self.damping)

  def hit_test(self, position, radius: Optional[float] = None) -> Optional[int]:
    """Return the index of the first point within `radius` of `position`."""
    query = as_vec2(position)
    r = self.hit_radius if radius is None else radius
    delta = self.x - query
    within = np.flatnonzero(delta[:, 0] ** 2 + delta[:, 1] ** 2 <= r * r)
    return int(within[0]) if within.size else None

  def drag(self, index: int, position) -> None:
    # Zero implied velocity while held; motion resumes from rest on release
    if self.pinned[index]:
      return
    pos = as_vec2(position)
    self.x[index] = pos
    self.x_prev[index] = pos

  def apply_impulse(self, impulse) -> None:
    """Kick every free point by displacing its position (shake effect)."""
    self.x[~self.pinned] += as_vec2(impulse)

  def constraint_errors(self) -> np.ndarray:
    return stick_errors(self.x, self._sticks)

  def get_state(self) -> dict[str, np.ndarray]:
    return {
      'x': self.x.copy(),
      'x_prev': self.x_prev.copy(),
      'pinned': self.pinned.copy(),
      'stick_ids': self.stick_ids,
      'rest_length': np.array([s.rest_length for s in self._sticks], dtype=np.float64),
    }


class ChainEngine(PointMassEngine):
  """Chain hanging from a pinned point at the top of the viewport."""

  def __init__(self, width: float, height: float, config: Optional[ChainConfig] = None,
               constants: PhysicsConstants = DEFAULT_CONSTANTS):
    self.config = config or ChainConfig()
    super().__init__(width, height, hit_radius=self.config.hit_radius, constants=constants)

  def initialize(self, segments: Optional[int] = None, segment_length: Optional[float] = None) -> None:
    requested = self.config.segments if segments is None else segments
    length = self.config.segment_length if segment_length is None else segment_length
    count = clamp_count(requested, self.config.max_segments)
    if count != requested:
      logger.debug(f"Chain segments clamped from {requested} to {count}")

    x0 = self.width / 2.0
    positions = [np.array([x0, self.config.top_offset + i * length]) for i in range(count)]
    self.load_points(positions, [i == 0 for i in range(count)])
    for i in range(count - 1):
      self.add_stick(i, i + 1)
    logger.debug(f"Chain initialized: {count} points, {len(self._sticks)} sticks")


class RagdollEngine(PointMassEngine):
  """Six-point stick figure wired as a star around the torso."""

  # (joint, x offset from center, y offset from start height)
  LAYOUT = (
    (RagdollJoint.HEAD, 0.0, 0.0),
    (RagdollJoint.TORSO, 0.0, 40.0),
    (RagdollJoint.LEFT_HAND, -25.0, 60.0),
    (RagdollJoint.RIGHT_HAND, 25.0, 60.0),
    (RagdollJoint.LEFT_FOOT, -15.0, 80.0),
    (RagdollJoint.RIGHT_FOOT, 15.0, 80.0),
  )
  LIMBS = (
    (RagdollJoint.HEAD, RagdollJoint.TORSO),
    (RagdollJoint.TORSO, RagdollJoint.LEFT_HAND),
    (RagdollJoint.TORSO, RagdollJoint.RIGHT_HAND),
    (RagdollJoint.TORSO, RagdollJoint.LEFT_FOOT),
    (RagdollJoint.TORSO, RagdollJoint.RIGHT_FOOT),
  )

  def __init__(self, width: float, height: float, config: Optional[RagdollConfig] = None,
               constants: PhysicsConstants = DEFAULT_CONSTANTS):
    self.config = config or RagdollConfig()
    super().__init__(width, height, hit_radius=self.config.hit_radius, constants=constants)

  def initialize(self) -> None:
    center_x = self.width / 2.0
    start_y = self.height / 3.0
    positions = [np.array([center_x + dx, start_y + dy]) for _, dx, dy in self.LAYOUT]
    self.load_points(positions, [False] * len(positions))
    for a, b in self.LIMBS:
      self.add_stick(a, b)
    logger.debug(f"Ragdoll initialized at ({center_x:.1f}, {start_y:.1f})")

  def joint(self, joint: RagdollJoint) -> np.ndarray:
    return read_only(self.x[int(joint)])
