"""Panel listing the scene's primitives and adding new ones."""

from __future__ import annotations

from pathtrace.geometry import Sphere
from pathtrace.materials import Lambertian, Metal
from pathtrace.scene import Primitive, Scene
from pathtrace.vector import Vec3
from pathtrace.viewer.state import EventFlags, Panel, PanelState

PRIMITIVE_KINDS = ("Sphere",)


def load_default_scene(scene: Scene) -> None:
    """Add the two small spheres and the ground sphere, tagged, to a scene."""
    scene.add(
        Primitive(
            Sphere(Vec3(0.75, 0.0, 1.0), 0.5),
            Lambertian(Vec3(0.8, 0.0, 0.9)),
            "Smol Sphere",
        )
    )
    scene.add(
        Primitive(
            Sphere(Vec3(-0.75, 0.0, 1.0), 0.5),
            Metal(Vec3(0.8, 0.9, 0.0), 0.0),
            "Smol Sphere 2",
        )
    )
    scene.add(
        Primitive(
            Sphere(Vec3(0.0, -100.5, -1.0), 100.0),
            Lambertian(Vec3(0.9, 0.9, 0.9)),
            "Ground Sphere",
        )
    )


class ScenePanel(Panel):
    """Shows the primitive hierarchy, selects entries and creates primitives."""

    def __init__(
        self, flags: EventFlags | None = None, state: PanelState | None = None
    ) -> None:
        super().__init__(flags, state)
        load_default_scene(self.state.scene)
        self.flags.scene_updated = True

    def entries(self) -> list[tuple[int, str, bool]]:
        """(1-based index, tag, selected) for every primitive in order."""
        active = self.state.active_primitive_idx
        return [
            (index, primitive.tag, index == active)
            for index, primitive in enumerate(self.state.scene, start=1)
        ]

    def select(self, index: int) -> None:
        """Make the primitive at the 1-based index the active one."""
        if not 1 <= index <= len(self.state.scene):
            raise IndexError(f"no primitive at index {index}")
        self.state.active_primitive_idx = index

    def create_primitive(self, kind: str) -> Primitive:
        """Add a new white, diffuse primitive of the given kind."""
        if kind not in PRIMITIVE_KINDS:
            raise ValueError(f"unknown primitive kind {kind!r}")
        primitive = Primitive(
            Sphere(Vec3(0.0, 0.0, 1.0), 0.25),
            Lambertian(Vec3(1.0, 1.0, 1.0)),
            "New Entity",
        )
        self.state.scene.add(primitive)
        self.flags.scene_updated = True
        return self.state.scene.primitives[-1]

    def render(self) -> str:
        lines = [
            "Add a new primitive: " + ", ".join(PRIMITIVE_KINDS),
            "List of current primitives:",
        ]
        lines.extend(
            f"{'>' if selected else ' '} {index}. {tag}"
            for index, tag, selected in self.entries()
        )
        return "\n".join(lines)