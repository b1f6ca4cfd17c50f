"""Panel showing the rendered scene and acting on render and export requests."""

from __future__ import annotations

from pathtrace.backend import RenderCaptureSpecification
from pathtrace.renderer import Renderer
from pathtrace.viewer.image import Image
from pathtrace.viewer.state import EventFlags, Panel, PanelState


class ViewportPanel(Panel):
    """Renders the shared scene at a downsampled size and keeps the result as an image."""

    def __init__(
        self,
        flags: EventFlags | None = None,
        state: PanelState | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        super().__init__(flags, state)
        self.renderer = renderer if renderer is not None else Renderer()
        self.width = 0
        self.height = 0
        self.prev_width = 0
        self.prev_height = 0
        self.image_data: list[int] = []
        self.image = Image(0, 0)

        self.state.camera = self.renderer.camera
        self.renderer.set_geometry(self.state.scene)

    def set_size(self, width: int, height: int) -> None:
        """Set the size of the area the panel has to draw in."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid viewport size {width}x{height}")
        self.width = width
        self.height = height

    def _capture_size(self) -> tuple[int, int]:
        factor = self.state.downsample_factor
        if factor < 1:
            raise ValueError("downsample factor must be at least 1")
        return self.width // factor, self.height // factor

    def _capture_spec(self) -> RenderCaptureSpecification:
        width, height = self._capture_size()
        needed = width * height
        if len(self.image_data) < needed:
            self.image_data.extend([0] * (needed - len(self.image_data)))
        return RenderCaptureSpecification(width, height, self.image_data)

    def render_scene(self) -> None:
        """Render the scene into the pixel buffer and show it."""
        spec = self._capture_spec()
        self.renderer.capture(spec)
        self.image.resize(spec.width, spec.height)
        self.image.set_data(self.image_data)

    def resize_scene(self) -> None:
        """Adapt the shown image to the current size, rendering on first use."""
        if self.prev_width * self.prev_height == 0:
            self.render_scene()
        spec = self._capture_spec()
        self.image.resize(spec.width, spec.height)
        self.image.set_data(self.image_data)
        self.prev_width = self.width
        self.prev_height = self.height

    def handle_panel_events(self) -> None:
        """Act on render, scene-update and export requests from other panels."""
        if self.flags.render_now:
            self.render_scene()
            self.flags.render_now = False

        if self.flags.scene_updated:
            self.renderer.set_geometry(self.state.scene)
            self.flags.scene_updated = False

        if self.flags.export_to_image:
            path = self.state.export_filepath
            self.flags.export_to_image = False
            self.state.export_filepath = ""
            if not path:
                raise ValueError("no export file path set")
            Renderer.save_capture(self._capture_spec(), path)

    def render(self) -> str:
        if (self.width, self.height) != (self.prev_width, self.prev_height):
            self.resize_scene()
        self.handle_panel_events()
        return (
            f"Viewport {self.width}x{self.height} "
            f"({self.image.width}x{self.image.height})"
        )