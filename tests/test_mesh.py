import array

import pytest
from pyglet import gl as pyglet_gl

from sceneviewer.mesh import Mesh


class _ArrayType(type):
    def __mul__(cls, count):
        def build(*values):
            return array.array(cls.code, values if values else [0] * count)

        return build


class _GLuint(metaclass=_ArrayType):
    code = "I"


class _GLfloat(metaclass=_ArrayType):
    code = "f"


class FakeGL:
    GL_ARRAY_BUFFER = 0x8892
    GL_ELEMENT_ARRAY_BUFFER = 0x8893
    GL_FLOAT = 0x1406
    GL_UNSIGNED_INT = 0x1405
    GL_FALSE = 0
    GL_TRIANGLES = 0x0004

    def __init__(self):
        self._next = 1
        self.generated = []
        self.bound_buffers = {}
        self.bound_vao = None
        self.vao_at_draw = None
        self.buffer_data = {}
        self.buffer_targets = {}
        self.attrib_pointers = []
        self.enabled = []
        self.draws = []
        self.deleted_arrays = []
        self.deleted_buffers = []

    def _gen(self, n, ptr):
        for i in range(n):
            ptr[i] = self._next
            self.generated.append(self._next)
            self._next += 1

    def glGenVertexArrays(self, n, ptr):
        self._gen(n, ptr)

    def glGenBuffers(self, n, ptr):
        self._gen(n, ptr)

    def glBindVertexArray(self, vao):
        self.bound_vao = vao

    def glBindBuffer(self, target, buffer):
        self.bound_buffers[target] = buffer

    def glBufferData(self, target, size, data, usage):
        raw = bytes(data)
        assert len(raw) == size
        buffer = self.bound_buffers[target]
        self.buffer_data[buffer] = raw
        self.buffer_targets[buffer] = target

    def glVertexAttribPointer(self, index, size, kind, normalized, stride, offset):
        self.attrib_pointers.append((index, size, kind, normalized, stride, offset))

    def glEnableVertexAttribArray(self, index):
        self.enabled.append(index)

    def glDrawElements(self, mode, count, kind, offset):
        self.vao_at_draw = self.bound_vao
        self.draws.append((mode, count, kind, offset))

    def glDeleteVertexArrays(self, n, ptr):
        self.deleted_arrays.extend(ptr[i] for i in range(n))

    def glDeleteBuffers(self, n, ptr):
        self.deleted_buffers.extend(ptr[i] for i in range(n))

    def data_for(self, target, code):
        (raw,) = [d for b, d in self.buffer_data.items() if self.buffer_targets[b] == target]
        return array.array(code, raw).tolist()

    def layout(self):
        return list(self.attrib_pointers), list(self.enabled)

    def bindings(self):
        return self.bound_vao, self.bound_buffers.get(self.GL_ARRAY_BUFFER)

    def released(self):
        return len(self.deleted_arrays), sorted(self.deleted_buffers)

    def vertex_array_id(self):
        buffers = set(self.buffer_data)
        (vao,) = [name for name in self.generated if name not in buffers]
        return vao


@pytest.fixture
def gl(monkeypatch):
    fake = FakeGL()
    monkeypatch.setattr(pyglet_gl, "GLuint", _GLuint)
    monkeypatch.setattr(pyglet_gl, "GLfloat", _GLfloat)
    monkeypatch.setattr(pyglet_gl, "glGenVertexArrays", fake.glGenVertexArrays)
    monkeypatch.setattr(pyglet_gl, "glGenBuffers", fake.glGenBuffers)
    monkeypatch.setattr(pyglet_gl, "glBindVertexArray", fake.glBindVertexArray)
    monkeypatch.setattr(pyglet_gl, "glBindBuffer", fake.glBindBuffer)
    monkeypatch.setattr(pyglet_gl, "glBufferData", fake.glBufferData)
    monkeypatch.setattr(pyglet_gl, "glVertexAttribPointer", fake.glVertexAttribPointer)
    monkeypatch.setattr(pyglet_gl, "glEnableVertexAttribArray", fake.glEnableVertexAttribArray)
    monkeypatch.setattr(pyglet_gl, "glDrawElements", fake.glDrawElements)
    monkeypatch.setattr(pyglet_gl, "glDeleteVertexArrays", fake.glDeleteVertexArrays)
    monkeypatch.setattr(pyglet_gl, "glDeleteBuffers", fake.glDeleteBuffers)
    return fake


VERTICES = [0.0, 0.5, 1.0, -1.0, 0.25, 2.0, 3.0, -0.5, 0.0]
INDICES = [0, 1, 2, 2, 1, 0]


def test_vertex_buffer_holds_positions(gl):
    Mesh(VERTICES, INDICES)
    assert gl.data_for(gl.GL_ARRAY_BUFFER, "f") == VERTICES


def test_element_buffer_holds_indices(gl):
    Mesh(VERTICES, INDICES)
    assert gl.data_for(gl.GL_ELEMENT_ARRAY_BUFFER, "I") == INDICES


def test_position_attribute_layout(gl):
    mesh = Mesh(VERTICES, INDICES)
    pointers, enabled = gl.layout()
    assert pointers == [(0, 3, gl.GL_FLOAT, gl.GL_FALSE, 12, None)]
    assert enabled == [0]
    mesh.draw()
    assert gl.draws[-1][1] == len(INDICES)


def test_construction_leaves_state_unbound(gl):
    mesh = Mesh(VERTICES, INDICES)
    assert gl.bindings() == (0, 0)
    assert gl.draws == []
    mesh.draw()
    vao = gl.vertex_array_id()
    assert gl.bindings() == (vao, 0)
    assert gl.vao_at_draw == vao
    assert gl.draws == [(gl.GL_TRIANGLES, len(INDICES), gl.GL_UNSIGNED_INT, None)]


def test_draw_uses_all_indices(gl):
    mesh = Mesh(VERTICES, INDICES)
    mesh.draw()
    assert gl.draws == [(gl.GL_TRIANGLES, len(INDICES), gl.GL_UNSIGNED_INT, None)]
    assert gl.vao_at_draw == gl.vertex_array_id()


def test_delete_releases_everything_once(gl):
    mesh = Mesh(VERTICES, INDICES)
    mesh.delete()
    mesh.delete()
    arrays, buffers = gl.released()
    assert arrays == 1
    assert buffers == sorted(gl.buffer_data)
    with pytest.raises(RuntimeError):
        mesh.draw()


def test_draw_after_delete_raises(gl):
    with Mesh(VERTICES, INDICES) as mesh:
        pass
    with pytest.raises(RuntimeError):
        mesh.draw()
    assert gl.draws == []