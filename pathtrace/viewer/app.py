"""Headless viewer application driving the panels frame by frame."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from pathtrace.renderer import Renderer
from pathtrace.rng import Random
from pathtrace.viewer.export import ExportForm
from pathtrace.viewer.scene_panel import ScenePanel
from pathtrace.viewer.settings_panel import RenderMode, SettingsPanel
from pathtrace.viewer.state import EventFlags, Panel, PanelState
from pathtrace.viewer.viewport_panel import ViewportPanel


class Application:
    """Owns the shared state and panels and runs frames until closed."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        title: str = "Path Tracer Viewer",
        max_frames: int | None = None,
        rng: Random | None = None,
    ) -> None:
        if max_frames is not None and max_frames < 0:
            raise ValueError("max_frames must not be negative")
        self.width = width
        self.height = height
        self.title = title
        self.max_frames = max_frames
        self.frame_index = 0
        self.should_close = max_frames == 0

        self.flags = EventFlags()
        self.state = PanelState()
        self.settings_panel = SettingsPanel(self.flags, self.state)
        self.viewport_panel = ViewportPanel(
            self.flags, self.state, Renderer(rng=rng)
        )
        self.scene_panel = ScenePanel(self.flags, self.state)
        self.panels: list[Panel] = [
            self.settings_panel,
            self.viewport_panel,
            self.scene_panel,
        ]
        self.export_form = ExportForm(self.flags, self.state)
        self.viewport_panel.set_size(width, height)

    def close(self) -> None:
        """Stop the run loop after the current frame."""
        self.should_close = True

    def frame(self) -> list[str]:
        """Draw one frame: every panel in order; returns what each panel showed."""
        self.frame_index += 1
        outputs = [text for text in (panel.render() for panel in self.panels) if text]
        if self.max_frames is not None and self.frame_index >= self.max_frames:
            self.should_close = True
        return outputs

    def run(self) -> int:
        """Draw frames until the application is closed."""
        while not self.should_close:
            self.frame()
        return 0


def _positive(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the scene viewer without a window.")
    parser.add_argument("--width", type=_positive, default=1280)
    parser.add_argument("--height", type=_positive, default=720)
    parser.add_argument("--frames", type=_positive, default=1)
    parser.add_argument("--downsample", type=_positive, default=5)
    parser.add_argument("--samples", type=_positive, default=1, help="samples per pixel")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in RenderMode],
        default=RenderMode.REAL_TIME.value,
    )
    parser.add_argument("--export", help="PNG file to export the last render to")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    app = Application(args.width, args.height, max_frames=args.frames)
    app.settings_panel.set_downsample(args.downsample)
    app.settings_panel.set_samples(args.samples)
    app.settings_panel.set_mode(RenderMode(args.mode))

    if args.export:
        target = Path(args.export)
        app.export_form.choose_directory(str(target.parent))
        app.export_form.filename = target.name
        app.export_form.submit()

    last: list[str] = []
    while not app.should_close:
        last = app.frame()
    print("\n\n".join(last))
    return 0