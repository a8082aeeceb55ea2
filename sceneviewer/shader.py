"""GLSL shader program with cached uniform lookup."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Iterable, Optional

ProgramFactory = Callable[[str, str], Any]


class ShaderError(Exception):
    """Raised when a shader fails to compile or link, or is used after deletion."""


def _link_program(vertex_src: str, fragment_src: str) -> Any:
    from pyglet.graphics.shader import Shader as ShaderStage
    from pyglet.graphics.shader import ShaderException, ShaderProgram

    try:
        vertex = ShaderStage(vertex_src, "vertex")
        fragment = ShaderStage(fragment_src, "fragment")
        return ShaderProgram(vertex, fragment)
    except ShaderException as exc:
        raise ShaderError(str(exc)) from exc


class Shader:
    """A linked vertex and fragment shader program.

    Setting a uniform that the program does not have is ignored, as OpenGL
    ignores writes to location -1. Subclasses may set ``program_factory``
    to supply another backend.
    """

    program_factory: ClassVar[Optional[ProgramFactory]] = None

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        link = type(self).program_factory or _link_program
        self._program: Any = link(vertex_src, fragment_src)
        self._uniform_cache: dict[str, bool] = {}

    def _live_program(self) -> Any:
        if self._program is None:
            raise ShaderError("shader program has been deleted")
        return self._program

    def _has_uniform(self, name: str) -> bool:
        known = self._uniform_cache.get(name)
        if known is None:
            known = name in self._live_program().uniforms
            self._uniform_cache[name] = known
        return known

    def _set(self, name: str, value: Any) -> None:
        program = self._live_program()
        if self._has_uniform(name):
            program[name] = value

    def use(self) -> None:
        """Make this program current."""
        self._live_program().use()

    def set_bool(self, name: str, value: bool) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def set_mat4(self, name: str, value: Iterable[float]) -> None:
        """Upload a column-major 4x4 matrix."""
        self._set(name, tuple(float(v) for v in value))

    def delete(self) -> None:
        """Release the GPU program; further use raises ShaderError."""
        if self._program is not None:
            self._program.delete()
            self._program = None
            self._uniform_cache.clear()

    def __enter__(self) -> Shader:
        return self

    def __exit__(self, *args: object) -> None:
        self.delete()