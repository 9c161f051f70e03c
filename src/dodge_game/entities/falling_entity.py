"""
falling_entity.py
-----------------
Runtime record for a single attack or item descending through the field.
"""

import itertools

import pygame

from dodge_game.entities.entity_kinds import EntityKind, category, scale


_ID_COUNTER = itertools.count(1)


class FallingEntity:
    """
    An active attack or item.

    Attributes:
        id (int): Process-unique, increasing identifier.
        kind (EntityKind): Variant that fixes speed, size and asset keys.
        category (EntityCategory): Copied from the kind for quick filtering.
        pos (pygame.Vector2): Center in world coordinates.
        scale (pygame.Vector2): Full width and height; also the collider extent.
        image: Sprite handle from the AssetRegistry (may be None in tests).
    """

    __slots__ = ("id", "kind", "category", "pos", "scale", "image")

    def __init__(self, kind: EntityKind, x: float, y: float, image=None):
        self.id = next(_ID_COUNTER)
        self.kind = kind
        self.category = category(kind)
        self.pos = pygame.Vector2(x, y)
        self.scale = pygame.Vector2(scale(kind))
        self.image = image

    @property
    def top(self) -> float:
        return self.pos.y + self.scale.y / 2

    def __repr__(self):
        return f"FallingEntity(id={self.id}, kind={self.kind.name}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}))"
