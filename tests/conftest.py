"""Test fixtures for the watch-face engines.

Provides reusable engines and viewports for unit and integration tests.
"""
import pytest
import numpy as np
from dialphys.config import RigidBodyConfig
from dialphys.particles import ParticleEngine
from dialphys.point_mass import ChainEngine, PointMassEngine, RagdollEngine
from dialphys.rigid_body import RigidBodyEngine

WATCH_SIZE = 200.0  # center (100, 100), boundary radius 90

@pytest.fixture
def chain_engine():
  """Chain of 5 points, segment length 10, pinned at (50, 30).

  Returns:
    ChainEngine on a 100x100 viewport (center (50, 50), boundary radius 40)
  """
  engine = ChainEngine(100.0, 100.0)
  engine.initialize(segments=5, segment_length=10.0)
  return engine

@pytest.fixture
def ragdoll_engine():
  engine = RagdollEngine(WATCH_SIZE, WATCH_SIZE)
  engine.initialize()
  return engine

@pytest.fixture
def open_point_engine():
  """Empty point-mass engine on a viewport large enough that the wall never interferes."""
  engine = PointMassEngine(2000.0, 2000.0)
  engine.set_gravity(0.0, 0.0)
  return engine

@pytest.fixture
def particle_engine():
  """Empty particle engine with gravity switched off."""
  engine = ParticleEngine(WATCH_SIZE, WATCH_SIZE)
  engine.set_gravity(0.0, 0.0)
  return engine

@pytest.fixture
def liquid_engine():
  engine = ParticleEngine(WATCH_SIZE, WATCH_SIZE)
  engine.initialize()
  return engine

@pytest.fixture
def body_engine():
  """Empty rigid-body engine with gravity switched off."""
  engine = RigidBodyEngine(WATCH_SIZE, WATCH_SIZE, config=RigidBodyConfig(seed=42))
  engine.set_gravity(0.0, 0.0)
  return engine

@pytest.fixture
def bodies_scene():
  engine = RigidBodyEngine(WATCH_SIZE, WATCH_SIZE, config=RigidBodyConfig(seed=42))
  engine.initialize()
  return engine

@pytest.fixture
def radial_distances():
  """Distance of each position from the world center of `engine`."""
  def _distances(engine, positions: np.ndarray) -> np.ndarray:
    offset = positions - engine.bounds.center
    return np.hypot(offset[:, 0], offset[:, 1])
  return _distances
