"""Physics bodies: bounds plus velocity."""

from __future__ import annotations

from dataclasses import dataclass, field

from djinni.geometry import Rectangle
from djinni.logger import default_logger


@dataclass
class Velocity:
    """Integer velocity per update."""

    dx: int = 0
    dy: int = 0


@dataclass
class PhysicsBody:
    """A body occupying ``bounds`` and moving with ``velocity``."""

    bounds: Rectangle
    velocity: Velocity = field(default_factory=Velocity)

    @classmethod
    def create(cls, x: int, y: int, w: int, h: int) -> PhysicsBody:
        """Create a body at rest with the given bounds."""
        return cls(Rectangle(x, y, w, h), Velocity(0, 0))

    def inspect(self) -> None:
        """Log this body and its bounds at debug level."""
        default_logger.log_debug(
            "Djinni::Physics::PhysicsBody( address:(%#x))", id(self)
        )
        self.bounds.inspect()