"""Panel editing render settings, the camera and the selected primitive."""

from __future__ import annotations

import enum

from pathtrace.geometry import Sphere
from pathtrace.materials import Lambertian, Material, Metal
from pathtrace.scene import Primitive
from pathtrace.timer import Timer
from pathtrace.vector import Vec3
from pathtrace.viewer.state import EventFlags, Panel, PanelState

MATERIAL_TYPES = ("Lambertian", "Metal")

_NAME_LIMIT = 255
_FUZZ_RANGE = (0.0, 1.0)
_RADIUS_RANGE = (0.001, 2.5)
_ORIGIN_RANGE = (-2.0, 2.0)


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return min(max(value, low), high)


class RenderMode(enum.Enum):
    """Whether the viewport re-renders every frame or on request."""

    REAL_TIME = "Real-time"
    OFFLINE = "Offline"


def material_type(material: Material | None) -> str:
    """Display name of a material's kind."""
    if isinstance(material, Lambertian):
        return "Lambertian"
    if isinstance(material, Metal):
        return "Metal"
    return "Unknown"


def create_material(type_name: str) -> Material | None:
    """A fresh white material of the named kind, or None for an unknown name."""
    if type_name == "Lambertian":
        return Lambertian(Vec3(1.0, 1.0, 1.0))
    if type_name == "Metal":
        return Metal(Vec3(1.0, 1.0, 1.0), 0.0)
    return None


class SettingsPanel(Panel):
    """Edits render mode, camera settings and the active primitive."""

    def __init__(
        self,
        flags: EventFlags | None = None,
        state: PanelState | None = None,
        timer: Timer | None = None,
    ) -> None:
        super().__init__(flags, state)
        self.timer = timer if timer is not None else Timer()
        self.mode = RenderMode.REAL_TIME

    def set_mode(self, mode: RenderMode) -> None:
        """Switch between real-time and offline rendering."""
        self.mode = RenderMode(mode)

    def request_render(self) -> None:
        """Ask the viewport for a render and start timing it."""
        self.flags.render_now = True
        self.timer.start()

    def active_primitive(self) -> Primitive | None:
        """The selected primitive, or None when nothing is selected."""
        index = self.state.active_primitive_idx
        if index <= 0:
            return None
        if index > len(self.state.scene):
            raise IndexError(f"no primitive at index {index}")
        return self.state.scene.primitives[index - 1]

    def _require_primitive(self) -> Primitive:
        primitive = self.active_primitive()
        if primitive is None:
            raise LookupError("no primitive selected")
        return primitive

    def rename(self, name: str) -> None:
        """Set the selected primitive's tag."""
        self._require_primitive().tag = name[:_NAME_LIMIT]

    def change_material(self, type_name: str) -> Material:
        """Give the selected primitive a fresh material of the named kind."""
        primitive = self._require_primitive()
        material = create_material(type_name)
        if material is None:
            raise ValueError(f"unknown material type {type_name!r}")
        primitive.material = material
        self.flags.scene_updated = True
        return material

    def set_albedo(self, albedo: Vec3) -> None:
        """Set the colour of the selected primitive's material."""
        material = self._require_primitive().material
        if not isinstance(material, (Lambertian, Metal)):
            raise TypeError(f"{material_type(material)} material has no albedo")
        material.albedo = Vec3(*albedo)

    def set_fuzz(self, fuzz: float) -> None:
        """Set the fuzz of the selected metal, kept within [0, 1]."""
        material = self._require_primitive().material
        if not isinstance(material, Metal):
            raise TypeError(f"{material_type(material)} material has no fuzz")
        material.fuzz = _clamp(fuzz, _FUZZ_RANGE)

    def _require_sphere(self) -> Sphere:
        shape = self._require_primitive().shape
        if not isinstance(shape, Sphere):
            raise TypeError("selected primitive is not a sphere")
        return shape

    def set_origin(self, origin: Vec3) -> None:
        """Move the selected sphere, each coordinate kept within [-2, 2]."""
        sphere = self._require_sphere()
        sphere.origin = Vec3(*(_clamp(c, _ORIGIN_RANGE) for c in origin))

    def set_radius(self, radius: float) -> None:
        """Resize the selected sphere, kept within [0.001, 2.5]."""
        self._require_sphere().radius = _clamp(radius, _RADIUS_RANGE)

    def set_samples(self, samples: int) -> None:
        """Set the camera's samples per pixel."""
        if samples < 0:
            raise ValueError("samples per pixel must not be negative")
        self.state.samples_per_pixel = samples

    def set_downsample(self, factor: int) -> None:
        """Set how much lower than the viewport the scene is rendered."""
        if factor < 1:
            raise ValueError("downsample factor must be at least 1")
        self.state.downsample_factor = factor

    def render(self) -> str:
        lines = ["Scene Settings", f"Mode: {self.mode.value}"]
        elapsed = self.timer.end("", False)
        lines.append(f"Time to render: {elapsed:.2f} ms")
        if self.mode is RenderMode.REAL_TIME:
            self.timer.start()
            self.flags.render_now = True

        lines.append("Camera:")
        if self.state.camera is not None:
            lines.append(f"Pixel Samples: {self.state.samples_per_pixel}")
        lines.append(f"Downsample Factor: {self.state.downsample_factor}")

        primitive = self.active_primitive()
        if primitive is not None:
            lines.append("Entity Settings")
            lines.append(f"Name: {primitive.tag}")
            lines.append(f"Selected ID: {self.state.active_primitive_idx}")
            material = primitive.material
            lines.append(f"Material: {material_type(material)}")
            if isinstance(material, (Lambertian, Metal)):
                a = material.albedo
                lines.append(f"Albedo: {a.x:.3f}, {a.y:.3f}, {a.z:.3f}")
            if isinstance(material, Metal):
                lines.append(f"Fuzz: {material.fuzz:.3f}")
            lines.append("Transform")
            shape = primitive.shape
            if isinstance(shape, Sphere):
                o = shape.origin
                lines.append(f"Origin: {o.x:.3f}, {o.y:.3f}, {o.z:.3f}")
                lines.append(f"Radius: {shape.radius:.3f}")
        return "\n".join(lines)