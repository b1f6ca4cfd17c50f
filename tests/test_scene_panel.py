import pytest

from pathtrace.materials import Lambertian, Metal
from pathtrace.scene import Scene
from pathtrace.vector import Vec3
from pathtrace.viewer.scene_panel import ScenePanel, load_default_scene
from pathtrace.viewer.state import EventFlags, PanelState


@pytest.fixture
def panel():
    return ScenePanel(EventFlags(), PanelState())


def test_default_scene_contents():
    scene = Scene()
    load_default_scene(scene)
    assert [p.tag for p in scene] == ["Smol Sphere", "Smol Sphere 2", "Ground Sphere"]
    assert [type(p.material) for p in scene] == [Lambertian, Metal, Lambertian]
    assert scene.primitives[2].shape.radius == 100.0
    assert scene.primitives[1].material.fuzz == 0.0


def test_construction_loads_scene_and_flags_update(panel):
    assert len(panel.state.scene) == 3
    assert panel.flags.scene_updated is True


def test_create_sphere(panel):
    panel.flags.scene_updated = False
    created = panel.create_primitive("Sphere")
    assert len(panel.state.scene) == 4
    assert created.tag == "New Entity"
    assert created.shape.origin == Vec3(0.0, 0.0, 1.0)
    assert created.shape.radius == 0.25
    assert created.material.albedo == Vec3(1.0, 1.0, 1.0)
    assert panel.flags.scene_updated is True
    assert panel.state.scene.primitives[-1] is created


def test_create_unknown_kind(panel):
    panel.flags.scene_updated = False
    with pytest.raises(ValueError):
        panel.create_primitive("Cube")
    assert len(panel.state.scene) == 3
    assert panel.flags.scene_updated is False


def test_entries_mark_selection(panel):
    panel.select(2)
    assert panel.state.active_primitive_idx == 2
    entries = panel.entries()
    assert [index for index, _, _ in entries] == [1, 2, 3]
    assert [selected for _, _, selected in entries] == [False, True, False]


@pytest.mark.parametrize("index", [0, 4, -1])
def test_select_out_of_range(panel, index):
    with pytest.raises(IndexError):
        panel.select(index)
    assert panel.state.active_primitive_idx == 1


def test_render_lists_tags(panel):
    panel.create_primitive("Sphere")
    text = panel.render()
    assert "List of current primitives:" in text
    for tag in ("Smol Sphere", "Smol Sphere 2", "Ground Sphere", "New Entity"):
        assert tag in text