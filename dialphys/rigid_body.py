"""Free rigid bodies (circles and boxes) bouncing inside the watch face.

Bodies do not collide with each other; the only contact is the circular wall,
where velocity is reflected about the radial normal and scaled by the body's
restitution. A body held by the pointer is excluded from gravity and velocity
integration but keeps spinning and is still kept inside the wall.
"""
import logging
from typing import Optional

import numpy as np

from .boundary import reflect_bodies
from .config import PhysicsConstants, RigidBodyConfig, DEFAULT_CONSTANTS
from .engine import SimulationEngine, clamp_count
from .errors import validate_positive_number
from .integration import euler_integrate, integrate_rotation
from .types import ShapeType, as_vec2, create_rigid_body_data, read_only

logger = logging.getLogger(__name__)


class RigidBodyEngine(SimulationEngine):

  def __init__(self, width: float, height: float, config: Optional[RigidBodyConfig] = None,
               constants: PhysicsConstants = DEFAULT_CONSTANTS):
    super().__init__(width, height,
                     gravity_scale=constants.RIGID_BODY_GRAVITY_SCALE,
                     default_gravity=constants.RIGID_BODY_DEFAULT_GRAVITY,
                     constants=constants)
    self.config = config or RigidBodyConfig()
    self.rng = np.random.default_rng(self.config.seed)
    self._load(create_rigid_body_data([], [], [], [], [], [], []), [])

  def _load(self, data: dict[str, np.ndarray], colors: list[str]) -> None:
    self.x = data['x']
    self.v = data['v']
    self.angle = data['angle']
    self.omega = data['omega']
    self.radius = data['radius']
    self.mass = data['mass']
    self.shape_type = data['shape_type']
    self.restitution = data['restitution']
    self.dragging = data['dragging']
    self.colors = list(colors)

  def initialize(self, count: Optional[int] = None) -> None:
    cfg = self.config
    requested = cfg.count if count is None else count
    n_bodies = clamp_count(requested, cfg.max_count)
    if n_bodies != requested:
      logger.debug(f"Body count clamped from {requested} to {n_bodies}")

    r = cfg.radius
    validate_positive_number(r, "body radius")
    column_step = (self.width - r * 2) / max(cfg.columns - 1, 1)

    positions, shapes, colors = [], [], []
    for i in range(n_bodies):
      positions.append(np.array([r + (i % cfg.columns) * column_step,
                                 r + (i // cfg.columns) * cfg.row_spacing]))
      shapes.append(ShapeType.CIRCLE if i % 2 == 0 else ShapeType.BOX)
      colors.append(cfg.colors[i % len(cfg.colors)])

    # Small random initial spin in [-1, 1) rad/s
    spins = list(self.rng.uniform(-1.0, 1.0, size=n_bodies))
    data = create_rigid_body_data(
      positions=positions,
      velocities=[np.zeros(2)] * n_bodies,
      angles=[0.0] * n_bodies,
      angular_vels=spins,
      radii=[r] * n_bodies,
      shape_types=shapes,
      restitutions=[cfg.restitution] * n_bodies,
    )
    self._load(data, colors)
    logger.debug(f"Rigid bodies initialized: {n_bodies} bodies, radius {r}")

  def add_body(self, shape_type: ShapeType, position, radius: float, velocity=(0.0, 0.0),
               angular_velocity: float = 0.0, restitution: Optional[float] = None,
               color: Optional[str] = None) -> int:
    validate_positive_number(radius, "body radius")
    if not isinstance(shape_type, ShapeType):
      raise ValueError("Shape type must be a ShapeType enum value")
    e = self.config.restitution if restitution is None else float(restitution)

    self.x = np.vstack([self.x, as_vec2(position).reshape(1, 2)])
    self.v = np.vstack([self.v, as_vec2(velocity).reshape(1, 2)])
    self.angle = np.append(self.angle, 0.0)
    self.omega = np.append(self.omega, float(angular_velocity))
    self.radius = np.append(self.radius, float(radius))
    self.mass = np.append(self.mass, float(radius) ** 2)
    self.shape_type = np.append(self.shape_type, np.int32(shape_type)).astype(np.int32)
    self.restitution = np.append(self.restitution, e)
    self.dragging = np.append(self.dragging, False)
    self.colors.append(color or self.config.colors[0])
    return self.x.shape[0] - 1

  @property
  def bodies(self) -> np.ndarray:
    return read_only(self.x)

  def shape(self, index: int) -> ShapeType:
    return ShapeType(int(self.shape_type[index]))

  def step(self) -> None:
    self.x, self.v = euler_integrate(self.x, self.v, self.gravity, self.dt, active=~self.dragging)
    self.angle = integrate_rotation(self.angle, self.omega, self.dt)
    reflect_bodies(self.x, self.v, self.radius, self.restitution, self.bounds)

  def hit_test(self, position) -> Optional[int]:
    """Return the topmost body under `position`, or None.

    Boxes are tested against their bounding circle.
    """
    delta = self.x - as_vec2(position)
    inside = np.flatnonzero(delta[:, 0] ** 2 + delta[:, 1] ** 2 <= self.radius ** 2)
    return int(inside[-1]) if inside.size else None

  def start_drag(self, index: int) -> None:
    self.dragging[index] = True
    self.v[index] = 0.0

  def update_drag(self, index: int, position) -> None:
    if self.dragging[index]:
      self.x[index] = as_vec2(position)

  def end_drag(self, index: int, velocity) -> None:
    # Release velocity comes from the gesture layer's recent drag displacement
    self.dragging[index] = False
    self.v[index] = as_vec2(velocity)

  def apply_impulse(self, index: int, delta_v) -> None:
    self.v[index] += as_vec2(delta_v)

  def get_state(self) -> dict[str, np.ndarray]:
    return {
      'x': self.x.copy(),
      'v': self.v.copy(),
      'angle': self.angle.copy(),
      'omega': self.omega.copy(),
      'radius': self.radius.copy(),
      'mass': self.mass.copy(),
      'shape_type': self.shape_type.copy(),
      'restitution': self.restitution.copy(),
      'dragging': self.dragging.copy(),
    }
