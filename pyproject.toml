[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sceneviewer"
version = "0.1.0"
description = "A small OpenGL 3D scene viewer with its own vector and matrix math and an OBJ model loader"
requires-python = ">=3.10"
keywords = ["opengl", "3d", "viewer", "obj", "wavefront", "matrix", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sceneviewer = "sceneviewer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sceneviewer"]

[tool.pytest.ini_options]
addopts = "-ra"
