"""Scene viewer: shows a rotating, swaying model until Escape is pressed."""

from __future__ import annotations

import argparse
import math
import sys
import time
from typing import Optional, Sequence

from .commands import Command, ExitCommand
from .mat4 import Mat4
from .mesh import Mesh
from .model_loader import ModelLoadError, load_obj
from .shader import Shader, ShaderError
from .vec3 import Vec3
from .window import Window, WindowError

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "3D Scene Viewer"
PI = 3.14
DEFAULT_MODEL = "./graphics/models/monkey.obj"

# Key symbol of the Escape key in pyglet.
ESCAPE = 0xFF1B

VERTEX_SHADER = """#version 330 core
layout (location = 0) in vec3 aPos;
uniform mat4 MVP;
void main()
{
   gl_Position = MVP * vec4(aPos.x, aPos.y, aPos.z, 1.0);
}
"""

FRAGMENT_SHADER = """#version 330 core
out vec4 FragColor;
void main()
{
   FragColor = vec4(0.1f, 0.2f, 0.3f, 1.0f);
}
"""


def model_view_projection(time: float, aspect_ratio: float) -> Mat4:
    """Combined transform for the model at the given time in seconds."""
    model = (
        Mat4.identity()
        .translate(Vec3(math.sin(time) * 5, 0.0, 0.0))
        .rotate(time, Vec3(0.0, 1.0, 0.0))
    )
    view = Mat4.look_at(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    projection = Mat4.perspective(PI / 2, aspect_ratio, 0.5, 1000.0)
    return projection * view * model


def process_input(window: Window, exit_command: Command) -> None:
    """Run the exit command while Escape is held."""
    if window.key_pressed(ESCAPE):
        exit_command.execute()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sceneviewer", description=WINDOW_TITLE)
    parser.add_argument("model", nargs="?", default=DEFAULT_MODEL, help="OBJ file to show")
    return parser.parse_args(argv)


def _run(vertices: list[float], indices: list[int]) -> None:
    import pyglet.gl as gl

    with Window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE) as window:
        exit_command = ExitCommand(window)
        with Shader(VERTEX_SHADER, FRAGMENT_SHADER) as shader, Mesh(vertices, indices) as mesh:
            start = time.perf_counter()
            while not window.should_close:
                elapsed = time.perf_counter() - start
                process_input(window, exit_command)
                gl.glClearColor(0.2, 0.3, 0.3, 1.0)
                gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

                mvp = model_view_projection(elapsed, window.aspect_ratio())
                shader.use()
                shader.set_mat4("MVP", mvp)
                mesh.draw()

                window.update()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the model and show it until the window is closed."""
    args = _parse_args(argv)
    try:
        vertices, indices = load_obj(args.model)
    except ModelLoadError as exc:
        print(f"[ModelLoader] {exc}", file=sys.stderr)
        print("[ModelLoader] Failed to load model!", file=sys.stderr)
        return 1
    try:
        _run(vertices, indices)
    except WindowError as exc:
        print(f"[Window] {exc}", file=sys.stderr)
        return 1
    except ShaderError as exc:
        print(f"[Shader] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())