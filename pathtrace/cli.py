"""Command that renders the sample scene to a PNG file."""

from __future__ import annotations

import argparse
from typing import Sequence

from pathtrace.backend import RenderCaptureSpecification
from pathtrace.camera import Camera, CameraSpecification
from pathtrace.geometry import Sphere
from pathtrace.materials import Lambertian, Metal
from pathtrace.renderer import Renderer
from pathtrace.scene import Primitive, Scene
from pathtrace.timer import Timer
from pathtrace.vector import Vec3

_FACTOR = 5


def build_default_scene() -> Scene:
    """Two small spheres, one diffuse and one metal, resting on a large ground sphere."""
    return Scene(
        [
            Primitive(
                Sphere(Vec3(0.75, 0.0, 1.0), 0.5),
                Lambertian(Vec3(0.8, 0.0, 0.9)),
            ),
            Primitive(
                Sphere(Vec3(-0.75, 0.0, 1.0), 0.5),
                Metal(Vec3(0.8, 0.9, 0.0), 0.0),
            ),
            Primitive(
                Sphere(Vec3(0.0, -100.5, -1.0), 100.0),
                Lambertian(Vec3(0.9, 0.9, 0.9)),
            ),
        ]
    )


def _positive(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the sample scene to a PNG file.")
    parser.add_argument("-o", "--output", default="sample.png", help="PNG file to write")
    parser.add_argument("--width", type=_positive, default=1280 // _FACTOR)
    parser.add_argument("--height", type=_positive, default=720 // _FACTOR)
    parser.add_argument("--samples", type=_positive, default=20, help="samples per pixel")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    global_timer = Timer()
    timer = Timer()
    global_timer.start()

    renderer = Renderer()

    timer.start()
    camera = Camera(
        CameraSpecification(
            vertical_fov=45.0,
            near_clip=0.1,
            far_clip=100.0,
            samples_per_pixel=args.samples,
            width=1080,
            height=720,
        )
    )
    timer.end("Camera creation")

    renderer.set_active_camera(camera)
    renderer.set_geometry(build_default_scene())

    spec = RenderCaptureSpecification(args.width, args.height)

    timer.start()
    renderer.capture(spec)
    timer.end("Rendering")

    Renderer.save_capture(spec, args.output)
    global_timer.end("CLI")
    return 0