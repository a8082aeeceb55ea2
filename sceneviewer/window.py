"""Application window with an OpenGL 3.3 core context."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional

NativeFactory = Callable[[int, int, str], Any]


class WindowError(Exception):
    """Raised when the window cannot be created or is used after destruction."""


def _create_native(width: int, height: int, title: str) -> Any:
    import pyglet
    import pyglet.gl as gl
    import pyglet.window

    config = gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    native = pyglet.window.Window(width, height, title, resizable=True, config=config)
    gl.glEnable(gl.GL_DEPTH_TEST)
    return native


class Window:
    """A resizable window that tracks key state and close requests.

    Closing is a request: ``close()`` (or the user closing the window) makes
    ``should_close`` true, and the native window is destroyed when the
    context manager exits. Subclasses may set ``native_factory`` to supply
    another backend.
    """

    native_factory: ClassVar[Optional[NativeFactory]] = None

    def __init__(self, width: int, height: int, title: str) -> None:
        create = type(self).native_factory or _create_native
        try:
            self._native = create(width, height, title)
        except WindowError:
            raise
        except Exception as exc:
            raise WindowError(f"cannot create window: {exc}") from exc
        self._should_close = False
        self._destroyed = False
        self._pressed: set[int] = set()
        self._native.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_close=self._on_close,
        )

    def _on_key_press(self, symbol: int, modifiers: int) -> None:
        self._pressed.add(symbol)

    def _on_key_release(self, symbol: int, modifiers: int) -> None:
        self._pressed.discard(symbol)

    def _on_close(self) -> bool:
        self._should_close = True
        return True

    def _live_native(self) -> Any:
        if self._destroyed:
            raise WindowError("window has been destroyed")
        return self._native

    @property
    def should_close(self) -> bool:
        """Whether closing has been requested."""
        return self._should_close

    def update(self) -> None:
        """Present the rendered frame and process pending events."""
        native = self._live_native()
        native.flip()
        native.dispatch_events()

    def key_pressed(self, symbol: int) -> bool:
        """Whether the key with this symbol is currently held down."""
        return symbol in self._pressed

    def aspect_ratio(self) -> float:
        """Framebuffer width divided by height."""
        width, height = self._live_native().get_framebuffer_size()
        return width / height

    def close(self) -> None:
        """Request that the window close."""
        self._should_close = True

    def _destroy(self) -> None:
        if not self._destroyed:
            self._destroyed = True
            self._should_close = True
            self._native.close()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *args: object) -> None:
        self._destroy()