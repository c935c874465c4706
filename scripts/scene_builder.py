"""Scene registry: maps a scene name to its engine and scenario config.

The watch driver creates an engine lazily, on the first tick after the
viewport size is known; `create_engine` is that step for the headless runner.
"""
from typing import Any, Optional

from dialphys.config import ChainConfig, LiquidConfig, RagdollConfig, RigidBodyConfig
from dialphys.engine import SimulationEngine
from dialphys.particles import ParticleEngine
from dialphys.point_mass import ChainEngine, RagdollEngine
from dialphys.rigid_body import RigidBodyEngine


SCENES = {
    "chain": (ChainEngine, ChainConfig),
    "ragdoll": (RagdollEngine, RagdollConfig),
    "liquid": (ParticleEngine, LiquidConfig),
    "bodies": (RigidBodyEngine, RigidBodyConfig),
}


def config_from_args(scene: str, args) -> Any:
    _, config_cls = _lookup(scene)
    return config_cls.from_args(args)


def create_engine(scene: str, width: float, height: float,
                  config: Optional[Any] = None) -> SimulationEngine:
    """Build and initialize the engine for a scene.

    Args:
        scene: One of the keys of SCENES
        width: Viewport width
        height: Viewport height
        config: Scenario config; the scene's defaults when omitted

    Returns:
        An initialized engine ready for `step()`
    """
    engine_cls, config_cls = _lookup(scene)
    if config is None:
        config = config_cls()
    elif not isinstance(config, config_cls):
        raise ValueError(f"Scene '{scene}' expects {config_cls.__name__}, got {type(config).__name__}")

    engine = engine_cls(width, height, config=config)
    engine.initialize()
    return engine


def _lookup(scene: str):
    if scene not in SCENES:
        raise ValueError(f"Unknown scene '{scene}'. Valid scenes: {', '.join(sorted(SCENES))}")
    return SCENES[scene]
