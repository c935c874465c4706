import numpy as np
from .config import PhysicsConstants, DEFAULT_CONSTANTS
from .geometry import WorldBounds, world_bounds
from .types import as_vec2

class SimulationEngine:
  """Common shape of the watch-face engines.

  An engine is built for one viewport, owns its entities, its gravity and its
  boundary, and advances by exactly one fixed time slice per `step()` call.
  Scheduling the calls is the driver's job.
  """

  def __init__(self, width: float, height: float, gravity_scale: float,
               default_gravity: tuple[float, float],
               constants: PhysicsConstants = DEFAULT_CONSTANTS):
    self.constants = constants
    self.width = float(width)
    self.height = float(height)
    self.bounds: WorldBounds = world_bounds(width, height, constants.BOUNDARY_MARGIN)
    self.dt = constants.TIME_STEP
    self.gravity_scale = gravity_scale
    self.gravity = np.array(default_gravity, dtype=np.float64)

  def set_gravity(self, x: float, y: float) -> None:
    # Raw sensor direction; the engine-specific scale is applied here
    self.gravity = as_vec2((x, y)) * self.gravity_scale

  def step(self) -> None:
    raise NotImplementedError

  def run_simulation(self, num_steps: int) -> None:
    for _ in range(num_steps):
      self.step()

  def get_state(self) -> dict[str, np.ndarray]:
    raise NotImplementedError

  def entity_positions(self) -> np.ndarray:
    return self.get_state()['x']

def clamp_count(value: int, maximum: int) -> int:
  return max(0, min(int(value), maximum))
