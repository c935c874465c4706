"""Cross-engine properties that hold for every scene."""
import pytest
import numpy as np
from scripts.scene_builder import SCENES, create_engine

TILTS = [(0.0, 1.0), (1.0, 0.0), (-0.7, -0.7), (0.0, 0.0)]


def _distances(engine):
    offset = engine.entity_positions() - engine.bounds.center
    return np.hypot(offset[:, 0], offset[:, 1])


@pytest.mark.parametrize("gravity", TILTS)
@pytest.mark.parametrize("width,height", [(200.0, 200.0), (180.0, 240.0)])
def test_point_masses_stay_inside(gravity, width, height):
    for scene in ("chain", "ragdoll"):
        engine = create_engine(scene, width, height)
        engine.set_gravity(*gravity)
        engine.run_simulation(240)

        free = ~engine.pinned
        assert np.all(_distances(engine)[free] <= engine.bounds.radius + 1e-9)


@pytest.mark.parametrize("gravity", TILTS)
def test_bodies_stay_inside(gravity):
    engine = create_engine("bodies", 200.0, 200.0)
    engine.set_gravity(*gravity)
    engine.run_simulation(240)
    assert np.all(_distances(engine) + engine.radius <= engine.bounds.radius + 1e-9)


def test_same_bounds_for_every_engine():
    bounds = {scene: create_engine(scene, 180.0, 240.0).bounds for scene in SCENES}
    for b in bounds.values():
        np.testing.assert_allclose(b.center, [90.0, 120.0])
        assert b.radius == pytest.approx(80.0)


def test_chain_pin_holds_under_tilt():
    engine = create_engine("chain", 200.0, 200.0)
    pin = engine.get_state()['x'][0]
    for gravity in TILTS:
        engine.set_gravity(*gravity)
        engine.run_simulation(60)
    np.testing.assert_array_equal(engine.points[0], pin)
