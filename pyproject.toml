[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nikola"
version = "0.1.0"
description = "A small real-time 3D rendering core: events, input, windowing, timing and an OpenGL context layer"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["rendering", "opengl", "game-engine", "graphics", "input", "events"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nikola"]

[tool.pytest.ini_options]
addopts = "-ra"
