"""Engine setup and teardown, plus a small sprite demo."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass

import pygame

from djinni.geometry import Coordinate, Line, Rectangle
from djinni.logger import Logger, default_logger
from djinni.renderable import create_sprite
from djinni.video import Renderer, VideoError, Window, initialize_video


@dataclass
class WindowSettings:
    """How the main window is created; None positions are left to the system."""

    name: str = ""
    posx: int | None = None
    posy: int | None = None
    width: int = 640
    height: int = 480
    flags: int = 0


@dataclass
class VideoSettings:
    """Renderer and image-loading options."""

    index: int = 0
    renderer_flags: int = 0
    video_flags: int = 0


class Engine:
    """Owns the window and renderer for the lifetime of the application."""

    def __init__(self) -> None:
        self.logger: Logger = default_logger
        self.window: Window | None = None
        self.renderer: Renderer | None = None
        self.window_settings: WindowSettings | None = None
        self.video_settings: VideoSettings | None = None

    def initialize(self, window_settings: WindowSettings, video_settings: VideoSettings) -> None:
        """Start video, open the window and create its renderer."""
        self.logger.log_dev("Djinni.initialize")
        self.window_settings = window_settings
        self.video_settings = video_settings

        initialize_video(video_settings.video_flags)
        self.window = Window(
            window_settings.name,
            window_settings.posx,
            window_settings.posy,
            window_settings.width,
            window_settings.height,
            window_settings.flags,
        )
        self.renderer = Renderer(
            self.window, video_settings.index, video_settings.renderer_flags
        )

    def set_flag(self, name: str, value: str) -> None:
        """Set a video hint; it takes effect for what is created afterwards."""
        os.environ[name] = value

    def terminate(self) -> None:
        """Release the renderer and window and shut video down."""
        self.logger.log_dev("Djinni.terminate")
        if self.renderer is not None:
            self.renderer.close()
        if self.window is not None:
            self.window.close()
        self.renderer = None
        self.window = None
        pygame.quit()

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info) -> None:
        self.terminate()


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def main(argv: list[str] | None = None) -> int:
    """Open a window and move a sprite across it until the window is closed."""
    parser = argparse.ArgumentParser(prog="djinni", description="Run the sprite demo.")
    parser.add_argument("image", nargs="?", default="bin/gfx/player.png")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    parser.add_argument("--delay", type=int, default=1000,
                        help="milliseconds between frames")
    args = parser.parse_args(argv)

    engine = Engine()
    engine.set_flag("SDL_RENDER_SCALE_QUALITY", "linear")
    engine.initialize(
        WindowSettings(name="Demo", width=800, height=800),
        VideoSettings(index=0),
    )
    try:
        first = Coordinate(10, 10)
        second = Coordinate(20, 20)
        first.inspect()
        Line(first, second).inspect()
        Rectangle(0, 0, 10, 20).inspect()

        renderer = engine.renderer
        try:
            entity = create_sprite(renderer, 100, 100, args.image)
        except VideoError as exc:
            print(f"djinni: {exc}", file=sys.stderr)
            return 1

        terminate = False
        frames = 0
        while not terminate:
            renderer.draw_color(0, 0, 0, 255)
            renderer.clear()

            terminate = _quit_requested()

            entity.move(5, 0)
            position = entity.position()
            entity.texture.blit(renderer, position.x, position.y)
            renderer.present()

            engine.logger.log_debug("Terminate( %d )", terminate)

            frames += 1
            if args.frames is not None and frames >= args.frames:
                break
            pygame.time.delay(args.delay)
        return 0
    finally:
        engine.terminate()


if __name__ == "__main__":
    sys.exit(main())