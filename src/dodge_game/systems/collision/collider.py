"""
collider.py
-----------
Axis-aligned bounding box built from a center point and full extent.
"""

import pygame


class Collider:
    """Represents a rectangular collision boundary in world coordinates."""

    __slots__ = ("center", "half")

    def __init__(self, center, size):
        self.center = pygame.Vector2(center)
        self.half = pygame.Vector2(size) / 2

    @classmethod
    def of_player(cls, player):
        return cls(player.pos, player.size)

    @classmethod
    def of_entity(cls, entity):
        return cls(entity.pos, entity.scale)

    @property
    def left(self):
        return self.center.x - self.half.x

    @property
    def right(self):
        return self.center.x + self.half.x

    @property
    def bottom(self):
        return self.center.y - self.half.y

    @property
    def top(self):
        return self.center.y + self.half.y

    def overlaps(self, other: "Collider") -> bool:
        """Strict overlap on both axes; boxes that only touch do not collide."""
        return (
            self.left < other.right and self.right > other.left
            and self.bottom < other.top and self.top > other.bottom
        )
