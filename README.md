# pathtrace

A compact path tracer in pure Python. It traces rays through a scene of
spheres shaded with diffuse (`Lambertian`) or mirror-like (`Metal`)
materials, with a white-to-blue sky gradient behind them, and writes the
result as an 8-bit RGBA PNG. It depends on nothing outside the standard
library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Rendering from the command line

```
pathtrace
```

This renders the default scene (`pathtrace.cli.build_default_scene`): a
purple diffuse sphere, a yellow mirror sphere and a large grey ground sphere.
The output is a 256×144 image in `sample.png`. The time taken to create the
camera, to render and to run the whole command is printed as
`<stage> took <n> ms`.

Options:

- `-o`, `--output FILE`: the PNG file to write (default `sample.png`)
- `--width N`, `--height N`: the image size (default 256 and 144)
- `--samples N`: samples per pixel (default 20)

## The viewer model

```
pathtrace-viewer
```

This runs the viewer application headless for a number of frames and then
prints what each panel showed in the last frame. On each frame, every panel
is drawn in order. The panels share an `EventFlags` and a `PanelState`:

- `SettingsPanel` shows the render mode (`RenderMode.REAL_TIME` or
  `RenderMode.OFFLINE`), the render time, the camera settings and the
  selected primitive. It edits the name, material (`change_material`,
  `set_albedo`, `set_fuzz`), origin and radius of the selected primitive,
  and it sets the sample count and the downsample factor. In real-time mode
  it requests a render on every frame.
- `ViewportPanel` renders the scene into an `Image` at the viewport size
  divided by the downsample factor. It also acts on render, scene-update and
  export requests.
- `ScenePanel` lists the primitives, selects one (`select`) and adds new
  spheres (`create_primitive("Sphere")`).
- `ExportForm` builds the export path from a directory and a file name.
  `submit()` asks the viewport to save the current render as a PNG.

Options:

- `--width N`, `--height N`: the viewport size (default 1280 and 720)
- `--frames N`: the number of frames to run (default 1)
- `--downsample N`: the downsample factor (default 5)
- `--samples N`: samples per pixel (default 1)
- `--mode {Real-time,Offline}`: the render mode (default `Real-time`)
- `--export FILE`: save the render to this PNG file

The application can also be driven from code. For example,
`Application(max_frames=3)` followed by `frame()` or `run()`.

## Using the library

The building blocks are:

- `Vec3` (in `pathtrace.vector`) and `Ray`
- `Sphere` and `HitRecord` (in `pathtrace.geometry`)
- `Lambertian` and `Metal`
- `Primitive` and `Scene`
- `Camera` with its `CameraSpecification`
- `Renderer`

A render goes through a `RenderCaptureSpecification`, and
`Renderer.capture` fills it with packed RGBA integers that have red in the
low byte. `Renderer.save_capture` writes those pixels as a PNG, flipped
vertically, so that the first row of the buffer becomes the bottom of the
picture. `encode_png` returns the PNG bytes without writing a file.
`pathtrace.viewer.image.Image.to_ppm` gives a binary PPM of a viewer image.

Random numbers come from a deterministic PCG-hash generator, `Random(state)`.
A renderer built with `Renderer(rng=Random(state))` therefore gives the same
image for the same state. `Timer` measures stages in milliseconds.
`DeletionQueue` runs clean-up callables in reverse order when it is flushed
or when its `with` block ends.

## What it does not do

- There is no window or interactive screen. The viewer draws its panels as
  text and is driven by command-line options or from code.
- Rendering runs only on the CPU, in a single process. `RendererAPI` has only
  `CPU`.
- The only shape is the sphere, and scenes cannot be loaded from or saved to
  files.
- The camera is fixed at (0, 0, 3) and looks down the negative Z axis.