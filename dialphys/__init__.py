from .types import ShapeType, RagdollJoint, Stick
from .geometry import WorldBounds, world_bounds
from .config import PhysicsConstants, ChainConfig, RagdollConfig, LiquidConfig, RigidBodyConfig
from .errors import SimulationError, ConfigurationError
from .point_mass import PointMassEngine, ChainEngine, RagdollEngine
from .particles import ParticleEngine
from .rigid_body import RigidBodyEngine

__all__ = ['ShapeType', 'RagdollJoint', 'Stick', 'WorldBounds', 'world_bounds',
           'PhysicsConstants', 'ChainConfig', 'RagdollConfig', 'LiquidConfig', 'RigidBodyConfig',
           'SimulationError', 'ConfigurationError',
           'PointMassEngine', 'ChainEngine', 'RagdollEngine', 'ParticleEngine', 'RigidBodyEngine']
