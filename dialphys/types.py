from enum import IntEnum
import numpy as np
from typing import NamedTuple

class ShapeType(IntEnum):
  CIRCLE = 0
  BOX = 1

class RagdollJoint(IntEnum):
  HEAD = 0
  TORSO = 1
  LEFT_HAND = 2
  RIGHT_HAND = 3
  LEFT_FOOT = 4
  RIGHT_FOOT = 5

class Stick(NamedTuple):
  point_a: int
  point_b: int
  rest_length: float

def as_vec2(value) -> np.ndarray:
  vec = np.asarray(value, dtype=np.float64).reshape(-1)
  if vec.shape != (2,):
    raise ValueError("Expected a 2D vector (x, y)")
  return vec

def create_point_data(positions: list[np.ndarray], pinned: list[bool]) -> dict[str, np.ndarray]:
  n_points = len(positions)
  x = np.stack(positions, axis=0) if n_points else np.zeros((0, 2))
  return {
    'x': x.astype(np.float64),
    'x_prev': x.astype(np.float64).copy(),
    'pinned': np.array(pinned, dtype=bool).reshape(n_points),
  }

def create_particle_data(positions: list[np.ndarray], velocities: list[np.ndarray],
                         radii: list[float]) -> dict[str, np.ndarray]:
  n_particles = len(positions)
  return {
    'x': np.stack(positions, axis=0).astype(np.float64) if n_particles else np.zeros((0, 2)),
    'v': np.stack(velocities, axis=0).astype(np.float64) if n_particles else np.zeros((0, 2)),
    'radius': np.array(radii, dtype=np.float64).reshape(n_particles),
  }

def create_rigid_body_data(positions: list[np.ndarray], velocities: list[np.ndarray],
                           angles: list[float], angular_vels: list[float],
                           radii: list[float], shape_types: list[ShapeType],
                           restitutions: list[float]) -> dict[str, np.ndarray]:
  n_bodies = len(positions)
  radius = np.array(radii, dtype=np.float64).reshape(n_bodies)

  return {
    'x': np.stack(positions, axis=0).astype(np.float64) if n_bodies else np.zeros((0, 2)),
    'v': np.stack(velocities, axis=0).astype(np.float64) if n_bodies else np.zeros((0, 2)),
    'angle': np.array(angles, dtype=np.float64).reshape(n_bodies),
    'omega': np.array(angular_vels, dtype=np.float64).reshape(n_bodies),
    'radius': radius,
    # Simple mass model: proportional to radius squared
    'mass': radius * radius,
    'shape_type': np.array([int(st) for st in shape_types], dtype=np.int32).reshape(n_bodies),
    'restitution': np.array(restitutions, dtype=np.float64).reshape(n_bodies),
    'dragging': np.zeros(n_bodies, dtype=bool),
  }

def read_only(array: np.ndarray) -> np.ndarray:
  view = array.view()
  view.setflags(write=False)
  return view

