"""A small 2D game engine on pygame: windows, renderers, textures, entities, geometry and logging."""

__version__ = "0.1.0"
__all__ = ["engine", "geometry", "logger", "physics", "renderable", "video"]