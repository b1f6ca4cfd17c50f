import pytest

from pathtrace.geometry import Sphere
from pathtrace.materials import Lambertian
from pathtrace.renderer import Renderer
from pathtrace.rng import Random
from pathtrace.scene import Primitive
from pathtrace.vector import Vec3
from pathtrace.viewer.state import EventFlags, PanelState
from pathtrace.viewer.viewport_panel import ViewportPanel


@pytest.fixture
def panel():
    flags = EventFlags()
    state = PanelState(downsample_factor=2)
    return ViewportPanel(flags, state, Renderer(rng=Random(7)))


def test_camera_is_shared_with_state(panel):
    assert panel.state.camera is panel.renderer.camera
    panel.state.samples_per_pixel = 3
    assert panel.renderer.camera.samples_per_pixel == 3


def test_render_scene_uses_downsampled_size(panel):
    panel.set_size(8, 4)
    panel.render_scene()
    assert (panel.image.width, panel.image.height) == (4, 2)
    assert panel.image.pixels == tuple(panel.image_data[:8])


def test_rendered_pixels_are_opaque(panel):
    panel.set_size(6, 6)
    panel.render_scene()
    assert all(p >> 24 == 255 for p in panel.image.pixels)


def test_first_render_after_resize_renders(panel):
    panel.set_size(8, 4)
    before = panel.renderer.backend.rng.state
    text = panel.render()
    assert panel.renderer.backend.rng.state != before
    assert (panel.prev_width, panel.prev_height) == (8, 4)
    assert panel.image.width == 4
    assert "8x4" in text


def test_render_without_changes_does_nothing(panel):
    panel.set_size(4, 4)
    panel.render()
    state = panel.renderer.backend.rng.state
    pixels = panel.image.pixels
    panel.render()
    assert panel.renderer.backend.rng.state == state
    assert panel.image.pixels == pixels


def test_render_now_is_handled_and_cleared(panel):
    panel.set_size(4, 2)
    panel.flags.render_now = True
    panel.handle_panel_events()
    assert panel.flags.render_now is False
    assert (panel.image.width, panel.image.height) == (2, 1)


def test_scene_update_reaches_renderer(panel):
    panel.state.scene.add(
        Primitive(Sphere(Vec3(0.0, 0.0, 0.0), 1.0), Lambertian(Vec3(0.5, 0.5, 0.5)))
    )
    panel.flags.scene_updated = True
    panel.handle_panel_events()
    assert panel.flags.scene_updated is False
    assert len(panel.renderer.scene) == len(panel.state.scene)


def test_export_writes_png_and_resets(panel, tmp_path):
    panel.set_size(4, 4)
    panel.render_scene()
    target = tmp_path / "out.png"
    panel.state.export_filepath = str(target)
    panel.flags.export_to_image = True
    panel.handle_panel_events()
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert panel.flags.export_to_image is False
    assert panel.state.export_filepath == ""


def test_export_without_path_raises(panel):
    panel.set_size(4, 4)
    panel.flags.export_to_image = True
    with pytest.raises(ValueError):
        panel.handle_panel_events()
    assert panel.flags.export_to_image is False


def test_negative_size_raises(panel):
    with pytest.raises(ValueError):
        panel.set_size(-1, 4)


def test_bad_downsample_raises(panel):
    panel.set_size(4, 4)
    panel.state.downsample_factor = 0
    with pytest.raises(ValueError):
        panel.render_scene()