"""State shared between viewer panels and the panel base class."""

from __future__ import annotations

from dataclasses import dataclass, field

from pathtrace.camera import Camera
from pathtrace.scene import Scene


@dataclass
class EventFlags:
    """Requests one panel raises for another to act on."""

    render_now: bool = False
    scene_updated: bool = False
    export_to_image: bool = False


@dataclass
class PanelState:
    """Settings and scene the panels edit together."""

    downsample_factor: int = 5
    camera: Camera | None = None
    active_primitive_idx: int = 1
    scene: Scene = field(default_factory=Scene)
    export_filepath: str = ""

    @property
    def samples_per_pixel(self) -> int:
        """Samples per pixel of the attached camera."""
        if self.camera is None:
            raise LookupError("no camera attached to the panel state")
        return self.camera.samples_per_pixel

    @samples_per_pixel.setter
    def samples_per_pixel(self, value: int) -> None:
        if self.camera is None:
            raise LookupError("no camera attached to the panel state")
        self.camera.samples_per_pixel = value


class Panel:
    """A viewer panel working on shared flags and state."""

    def __init__(
        self, flags: EventFlags | None = None, state: PanelState | None = None
    ) -> None:
        self.flags = flags if flags is not None else EventFlags()
        self.state = state if state is not None else PanelState()

    def render(self) -> str | None:
        """Draw the panel; the base panel draws nothing."""
        return None