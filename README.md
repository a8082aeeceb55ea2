# sceneviewer

A small 3D scene viewer. It opens a resizable OpenGL 3.3 core window, loads a
Wavefront OBJ model and draws it in a single flat colour while it slides from
side to side and spins about its vertical axis.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
sceneviewer [MODEL]
```

`MODEL` is the OBJ file to show. Without it the viewer reads
`./graphics/models/monkey.obj`, a path relative to the directory you start it
in. Press Escape, or close the window, to quit.

The command exits with status 1, after printing a message to standard error,
when the model cannot be loaded, the window cannot be created or the shaders
fail to compile or link; otherwise it exits with status 0.

## Using the library

The math types are plain Python and need no window.

```python
import math

from sceneviewer.vec3 import Vec3
from sceneviewer.vec4 import Vec4
from sceneviewer.mat4 import Mat4

model = Mat4.identity().translate(Vec3(1.0, 0.0, 0.0)).rotate(math.pi / 2, Vec3(0.0, 1.0, 0.0))
view = Mat4.look_at(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
projection = Mat4.perspective(math.pi / 2, 4 / 3, 0.5, 1000.0)

mvp = projection * view * model
clip = mvp * Vec4.from_vec3(Vec3(0.0, 0.0, 0.0), 1.0)
```

- `Vec3` is an immutable vector with `+`, `-`, multiplication by a number,
  `length()`, `normalize()`, `dot()` and `cross()`. Normalising the zero
  vector raises `ZeroDivisionError`.
- `Mat4` is an immutable 4x4 matrix holding sixteen floats in column-major
  order, the order OpenGL expects; indexing and iterating follow that order.
  `Mat4()` is all zeros. `identity()`, `look_at()` and `perspective()` build
  new matrices; `translate()`, `scale()` and `rotate()` return
  `self * transform`. Giving other than sixteen values raises `ValueError`.
- `Vec4` is a homogeneous vector; `matrix * vec4` transforms it.

### Loading models

`sceneviewer.model_loader.load_obj(path)` reads an OBJ file and returns a flat
list of vertex positions (x, y, z, x, y, z, ...) and a list of triangle
indices. `parse_obj(lines)` does the same for lines of text you already have.

Only `v` and `f` statements are used; everything else is skipped. Faces with
more than three corners are split into a fan of triangles, negative
(relative) indices are resolved, and texture and normal indices in a corner
such as `3/1/2` are ignored. Each position that a face uses appears once in
the result, in order of first use. A file that cannot be opened, a malformed
vertex or an index that is zero or out of range raises `ModelLoadError`.

### Rendering objects

`sceneviewer.window.Window`, `sceneviewer.shader.Shader` and
`sceneviewer.mesh.Mesh` wrap the OpenGL objects the viewer uses, through
pyglet. Each is a context manager that releases what it holds when the block
ends.

- `Window(width, height, title)` tracks held keys (`key_pressed(symbol)`) and
  close requests (`close()`, `should_close`); `update()` presents the frame and
  processes events, and `aspect_ratio()` gives framebuffer width over height.
  Failing to create it raises `WindowError`.
- `Shader(vertex_src, fragment_src)` links a program and raises `ShaderError`
  on compile or link errors. `set_bool`, `set_int`, `set_float` and `set_mat4`
  set uniforms; a uniform the program lacks is silently ignored. Using a
  deleted shader raises `ShaderError`.
- `Mesh(vertices, indices)` uploads positions and indices; `draw()` draws its
  triangles and raises `RuntimeError` once the mesh is deleted.

`Window.native_factory`, `Shader.program_factory` and `Mesh.gl_api` can be set
in a subclass to supply another backend.

`sceneviewer.commands` holds the `Command` base class and `ExitCommand`, which
asks a window to close. `sceneviewer.app.model_view_projection(time,
aspect_ratio)` builds the matrix the viewer draws with at a given time in
seconds, and `process_input(window, exit_command)` runs the command while
Escape is held.

## What it does not do

The camera is fixed: there is no mouse or scroll control of the view. Only
one model is shown, with no lighting, normals, textures or materials, and the
model's motion is fixed as well.