"""OpenGL 3D scene viewer with vector and matrix math, an OBJ loader and GL object wrappers."""

__version__ = "0.1.0"