"""Liquid-like particle swarm resolved with a penalty method.

Particles carry a velocity and are integrated with explicit Euler. Contacts
are handled purely by moving positions: the wall clamps discs back inside and
overlapping pairs are pushed apart by half their penetration each. With only
two passes per step a dense cluster is not fully separated; overlap shrinks
from step to step instead.
"""
import logging
from typing import Optional

import numpy as np

from .boundary import clamp_particles
from .config import LiquidConfig, PhysicsConstants, DEFAULT_CONSTANTS
from .engine import SimulationEngine, clamp_count
from .errors import validate_positive_number
from .integration import euler_integrate
from .solver import resolve_overlaps, total_overlap
from .types import as_vec2, create_particle_data, read_only

logger = logging.getLogger(__name__)


class ParticleEngine(SimulationEngine):

  def __init__(self, width: float, height: float, config: Optional[LiquidConfig] = None,
               constants: PhysicsConstants = DEFAULT_CONSTANTS):
    super().__init__(width, height,
                     gravity_scale=constants.PARTICLE_GRAVITY_SCALE,
                     default_gravity=constants.PARTICLE_DEFAULT_GRAVITY,
                     constants=constants)
    self.config = config or LiquidConfig()
    self.iterations = constants.PARTICLE_ITERATIONS
    self._load(create_particle_data([], [], []))

  def _load(self, data: dict[str, np.ndarray]) -> None:
    self.x = data['x']
    self.v = data['v']
    self.radius = data['radius']

  def initialize(self, rows: Optional[int] = None, columns: Optional[int] = None,
                 radius: Optional[float] = None) -> None:
    cfg = self.config
    req_rows = cfg.rows if rows is None else rows
    req_columns = cfg.columns if columns is None else columns
    r = cfg.radius if radius is None else radius
    validate_positive_number(r, "particle radius")

    n_rows = clamp_count(req_rows, cfg.max_rows)
    n_columns = clamp_count(req_columns, cfg.max_columns)
    if (n_rows, n_columns) != (req_rows, req_columns):
      logger.debug(f"Particle grid clamped from {req_rows}x{req_columns} to {n_rows}x{n_columns}")

    spacing = r * cfg.spacing_factor
    positions = []
    for i in range(n_rows):
      for j in range(n_columns):
        positions.append(np.array([cfg.left_offset + j * spacing,
                                   self.height - cfg.bottom_offset - i * spacing]))

    count = len(positions)
    self._load(create_particle_data(positions, [np.zeros(2)] * count, [r] * count))
    logger.debug(f"Particle grid initialized: {count} particles, radius {r}")

  def add_particle(self, position, radius: float, velocity=(0.0, 0.0)) -> int:
    validate_positive_number(radius, "particle radius")
    self.x = np.vstack([self.x, as_vec2(position).reshape(1, 2)])
    self.v = np.vstack([self.v, as_vec2(velocity).reshape(1, 2)])
    self.radius = np.append(self.radius, float(radius))
    return self.x.shape[0] - 1

  @property
  def particles(self) -> np.ndarray:
    return read_only(self.x)

  def step(self) -> None:
    self.x, self.v = euler_integrate(self.x, self.v, self.gravity, self.dt)
    for _ in range(self.iterations):
      self.relax()

  def relax(self) -> None:
    """One boundary-clamp plus overlap-resolution pass."""
    clamp_particles(self.x, self.radius, self.bounds)
    resolve_overlaps(self.x, self.radius)

  def apply_radial_impulse(self, position, radius: Optional[float] = None,
                           strength: Optional[float] = None) -> int:
    """Push particles near a tap point away from it.

    Every particle closer than `radius` gets its velocity increased by its
    offset from the tap point times `strength`.

    Returns:
      Number of particles affected
    """
    r = self.config.tap_radius if radius is None else radius
    k = self.config.tap_strength if strength is None else strength
    offset = self.x - as_vec2(position)
    near = offset[:, 0] ** 2 + offset[:, 1] ** 2 < r * r
    self.v[near] += offset[near] * k
    return int(near.sum())

  def total_overlap(self) -> float:
    return total_overlap(self.x, self.radius)

  def get_state(self) -> dict[str, np.ndarray]:
    return {
      'x': self.x.copy(),
      'v': self.v.copy(),
      'radius': self.radius.copy(),
    }
