"""Entities drawn on screen and sprites built from image files."""

from __future__ import annotations

from enum import IntEnum

from djinni.geometry import Coordinate, Rectangle
from djinni.logger import default_logger
from djinni.physics import PhysicsBody
from djinni.video import Renderer, Texture


class EntityState(IntEnum):
    """Whether an entity is still in play."""

    DEAD = 0
    ALIVE = 1


class EntityType(IntEnum):
    """What an entity is drawn as."""

    NONE = 0
    SPRITE = 1


class Entity:
    """A drawable object with draw bounds and a physics body kept in step."""

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        entity_type: EntityType = EntityType.NONE,
    ) -> None:
        self.type = entity_type
        self.status = EntityState.ALIVE
        self.keep_alive = False
        self.always_update = False
        self.bounds = Rectangle(x, y, w, h)
        self.body = PhysicsBody.create(x, y, w, h)
        self.texture: Texture | None = None

    def __repr__(self) -> str:
        return (
            f"Entity(type={self.type.name}, status={self.status.name}, "
            f"bounds={self.bounds!r})"
        )

    def position(self) -> Coordinate:
        """Return the top-left corner of the physics body."""
        return self.body.bounds.position()

    def move_to(self, x: int, y: int) -> None:
        """Place both the physics body and the draw bounds at ``(x, y)``."""
        self.body.bounds.move_to(x, y)
        self.bounds.move_to(x, y)

    def move(self, dx: int, dy: int) -> None:
        """Shift the entity by ``(dx, dy)``."""
        current = self.position()
        self.move_to(current.x + dx, current.y + dy)

    def inspect(self) -> None:
        """Log the entity, its bounds, body and position at debug level."""
        default_logger.log_debug(
            "Djinni::Renderable::Entity( address:(%#x) type:(%d) status:(%d) "
            "alwaysUpdate:(%d) keepAlive:(%d))",
            id(self), self.type, self.status, self.always_update, self.keep_alive,
        )
        self.bounds.inspect()
        self.body.inspect()
        self.position().inspect()


def create_sprite(renderer: Renderer, x: int, y: int, filename: str) -> Entity:
    """Load ``filename`` and return a sprite entity of the image's size at ``(x, y)``."""
    texture = Texture.load(renderer, filename)
    entity = Entity(x, y, texture.bounds.w, texture.bounds.h, EntityType.SPRITE)
    entity.texture = texture
    return entity