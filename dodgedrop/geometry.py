"""2D vectors, axis-aligned boxes and the base for positioned game objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Aabb:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


def intersects(a: Aabb, b: Aabb) -> bool:
    """Return True when the boxes overlap; shared edges do not count."""
    if a.right <= b.left:
        return False
    if a.left >= b.right:
        return False
    if a.bottom <= b.top:
        return False
    if a.top >= b.bottom:
        return False
    return True


@dataclass
class Entity:
    """A positioned box; ``pos`` is the top-left corner."""

    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=lambda: Vec2(32.0, 32.0))
    alive: bool = field(default=True, init=False)

    def kill(self) -> None:
        """Mark the entity as no longer alive."""
        self.alive = False

    @property
    def aabb(self) -> Aabb:
        """The bounding box in world coordinates."""
        return Aabb(
            self.pos.x,
            self.pos.y,
            self.pos.x + self.size.x,
            self.pos.y + self.size.y,
        )