from dodge_game.systems.collision.collider import Collider
from dodge_game.systems.collision.collision_manager import (
    CollisionManager,
    CollisionEffect,
    DamagePlayer,
    ApplyItem,
)

__all__ = ["Collider", "CollisionManager", "CollisionEffect", "DamagePlayer", "ApplyItem"]
