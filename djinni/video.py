"""Windows, renderers and textures on top of pygame's display."""

from __future__ import annotations

import os

import pygame

from djinni.geometry import Rectangle
from djinni.logger import default_logger


class VideoError(RuntimeError):
    """Raised when the video system, a window, or a texture cannot be used."""


def initialize_video(flags: int = 0) -> None:
    """Start the video subsystem.

    ``flags`` selects image formats to prepare; pygame's image loader handles
    every format it was built with, so they need no separate preparation.
    """
    default_logger.log_dev("Djinni::Video.initialize")
    try:
        pygame.display.init()
    except pygame.error as exc:
        default_logger.log_fatal("Djinni (%s)", str(exc))
        raise VideoError(str(exc)) from exc
    default_logger.log_dev("Djinni::Video::Texture.initialize")


class Window:
    """The application window.

    ``x`` and ``y`` place the window on screen; leave either as None to let
    the system choose.
    """

    def __init__(
        self,
        title: str,
        x: int | None = None,
        y: int | None = None,
        width: int = 640,
        height: int = 480,
        flags: int = 0,
    ) -> None:
        default_logger.log_dev("Djinni::Video::Window.create")
        self.title = title
        self.width = width
        self.height = height
        self.flags = flags
        if x is not None and y is not None:
            os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"
        try:
            self.surface: pygame.Surface | None = pygame.display.set_mode(
                (width, height), flags
            )
        except pygame.error as exc:
            raise VideoError(str(exc)) from exc
        pygame.display.set_caption(title)

    def close(self) -> None:
        """Destroy the window; closing an already closed window does nothing."""
        default_logger.log_dev("Djinni::Video::Window.destroy (%#x)", id(self))
        if self.surface is None:
            return
        pygame.display.quit()
        self.surface = None

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Renderer:
    """Draws onto a window's surface."""

    def __init__(self, window: Window, index: int = -1, flags: int = 0) -> None:
        default_logger.log_dev("Djinni::Video::Renderer.create")
        if window.surface is None:
            raise VideoError("cannot create a renderer for a closed window")
        self.window: Window | None = window
        self.index = index
        self.flags = flags
        self.color = pygame.Color(0, 0, 0, 255)

    @property
    def surface(self) -> pygame.Surface | None:
        """The surface drawn on, or None once closed."""
        return None if self.window is None else self.window.surface

    def _target(self) -> pygame.Surface:
        target = self.surface
        if target is None:
            raise VideoError("renderer is closed")
        return target

    def draw_color(self, r: int, g: int, b: int, a: int) -> None:
        """Set the colour used by :meth:`clear`."""
        self.color = pygame.Color(r, g, b, a)

    def clear(self) -> None:
        """Fill the whole target with the current draw colour."""
        self._target().fill(self.color)

    def present(self) -> None:
        """Show what has been drawn."""
        self._target()
        pygame.display.flip()

    def close(self) -> None:
        """Release the renderer."""
        default_logger.log_dev("Djinni::Video::Renderer.destroy (%#x)", id(self))
        self.window = None

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Texture:
    """An image loaded for drawing, with its size in ``bounds``."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface: pygame.Surface | None = surface
        width, height = surface.get_size()
        self.bounds = Rectangle(0, 0, width, height)

    @classmethod
    def load(cls, renderer: Renderer, filename: str) -> Texture:
        """Load an image file for drawing with ``renderer``."""
        default_logger.log_debug("Djinni::Video::Texture.load( name: %s )", filename)
        try:
            surface = pygame.image.load(os.fspath(filename))
        except (pygame.error, OSError) as exc:
            default_logger.log_error(
                "Djinni::Video::Texture.load( name: (%s) status:(failure))", filename
            )
            raise VideoError(f"cannot load texture {filename!r}: {exc}") from exc
        if renderer.surface is not None and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return cls(surface)

    def blit(self, renderer: Renderer, x: int, y: int) -> None:
        """Draw the whole texture with its top-left corner at ``(x, y)``."""
        if self.surface is None:
            raise VideoError("texture is closed")
        renderer._target().blit(self.surface, (x, y))

    def close(self) -> None:
        """Release the image data."""
        self.surface = None

    def __enter__(self) -> Texture:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()