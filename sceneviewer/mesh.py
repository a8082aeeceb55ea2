"""Indexed triangle mesh stored in GPU buffers."""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, Optional

_POSITION_ATTRIBUTE = 0
_COMPONENTS = 3


def _default_gl() -> Any:
    import pyglet.gl as gl

    return gl


class Mesh:
    """Vertex positions and triangle indices uploaded to a vertex array.

    Subclasses may set ``gl_api`` to an object offering the OpenGL calls
    used here; by default the pyglet bindings are used.
    """

    gl_api: ClassVar[Optional[Any]] = None

    def __init__(self, vertices: Iterable[float], indices: Iterable[int]) -> None:
        gl = type(self).gl_api or _default_gl()
        self._gl = gl
        self._vertices = tuple(float(v) for v in vertices)
        self._indices = tuple(int(i) for i in indices)

        self._vao = self._generate(gl.glGenVertexArrays)
        self._vbo = self._generate(gl.glGenBuffers)
        self._ebo = self._generate(gl.glGenBuffers)

        gl.glBindVertexArray(self._vao)

        vertex_data = (gl.GLfloat * len(self._vertices))(*self._vertices)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, memoryview(vertex_data).nbytes, vertex_data, gl.GL_STATIC_DRAW
        )

        index_data = (gl.GLuint * len(self._indices))(*self._indices)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER,
            memoryview(index_data).nbytes,
            index_data,
            gl.GL_STATIC_DRAW,
        )

        float_size = memoryview((gl.GLfloat * 1)()).nbytes
        gl.glVertexAttribPointer(
            _POSITION_ATTRIBUTE, _COMPONENTS, gl.GL_FLOAT, gl.GL_FALSE, _COMPONENTS * float_size, None
        )
        gl.glEnableVertexAttribArray(_POSITION_ATTRIBUTE)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindVertexArray(0)
        self._deleted = False

    def _generate(self, generator: Any) -> int:
        handles = (self._gl.GLuint * 1)()
        generator(1, handles)
        return int(handles[0])

    def _release(self, deleter: Any, handle: int) -> None:
        deleter(1, (self._gl.GLuint * 1)(handle))

    def draw(self) -> None:
        """Draw all triangles with the currently bound program."""
        if self._deleted:
            raise RuntimeError("mesh has been deleted")
        gl = self._gl
        gl.glBindVertexArray(self._vao)
        gl.glDrawElements(gl.GL_TRIANGLES, len(self._indices), gl.GL_UNSIGNED_INT, None)

    def delete(self) -> None:
        """Release the vertex array and its buffers."""
        if self._deleted:
            return
        self._deleted = True
        gl = self._gl
        self._release(gl.glDeleteVertexArrays, self._vao)
        self._release(gl.glDeleteBuffers, self._vbo)
        self._release(gl.glDeleteBuffers, self._ebo)

    def __enter__(self) -> Mesh:
        return self

    def __exit__(self, *args: object) -> None:
        self.delete()