[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtrace"
version = "0.1.0"
description = "A small CPU path tracer with spheres, diffuse and metal materials, PNG export and a headless, scriptable viewer model."
requires-python = ">=3.10"
dependencies = []
keywords = ["path tracing", "ray tracing", "rendering", "graphics", "png"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathtrace = "pathtrace.cli:main"
pathtrace-viewer = "pathtrace.viewer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtrace"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
