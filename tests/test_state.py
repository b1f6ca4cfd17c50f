import pytest

from pathtrace.camera import Camera, CameraSpecification
from pathtrace.geometry import Sphere
from pathtrace.materials import Lambertian
from pathtrace.scene import Primitive
from pathtrace.vector import Vec3
from pathtrace.viewer.state import EventFlags, Panel, PanelState


def test_event_flags_start_cleared():
    flags = EventFlags()
    assert (flags.render_now, flags.scene_updated, flags.export_to_image) == (
        False,
        False,
        False,
    )


def test_panel_state_defaults():
    state = PanelState()
    assert state.downsample_factor == 5
    assert state.active_primitive_idx == 1
    assert state.export_filepath == ""
    assert len(state.scene) == 0
    assert state.camera is None


def test_samples_follow_camera():
    camera = Camera(CameraSpecification(samples_per_pixel=7))
    state = PanelState(camera=camera)
    assert state.samples_per_pixel == 7
    state.samples_per_pixel = 3
    assert camera.samples_per_pixel == 3


def test_samples_without_camera_raise():
    state = PanelState()
    with pytest.raises(LookupError):
        _ = state.samples_per_pixel
    with pytest.raises(LookupError):
        state.samples_per_pixel = 4
    assert state.camera is None

    camera = Camera(CameraSpecification(samples_per_pixel=9))
    state.camera = camera
    assert state.samples_per_pixel == 9
    assert camera.samples_per_pixel == 9


def test_states_do_not_share_scenes():
    first = PanelState()
    second = PanelState()
    first.scene.add(Primitive(Sphere(Vec3(), 1.0), Lambertian(Vec3(1.0, 1.0, 1.0))))
    assert len(first.scene) == 1
    assert len(second.scene) == 0


def test_panel_keeps_given_flags_and_state():
    flags = EventFlags()
    state = PanelState()
    panel = Panel(flags, state)
    panel.flags.render_now = True
    panel.state.downsample_factor = 2
    assert flags.render_now is True
    assert state.downsample_factor == 2


def test_base_panel_renders_nothing():
    assert Panel().render() is None