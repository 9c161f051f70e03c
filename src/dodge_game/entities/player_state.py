"""
player_state.py
---------------
Health and position of the player for one game session.

Position is only moved by systems.player_movement and health is only
changed through apply_health(), which keeps it inside [0, max_hp].
"""

import pygame

from dodge_game.core.runtime.game_settings import Player


class PlayerState:
    """Singleton-per-session player data."""

    def __init__(self, x: float = Player.START_X, y: float = Player.START_Y,
                 hp: int = Player.MAX_HP, max_hp: int = Player.MAX_HP,
                 speed: float = Player.SPEED, size=Player.SIZE):
        self.pos = pygame.Vector2(x, y)
        self.size = pygame.Vector2(size)
        self.speed = speed
        self.max_hp = max_hp
        self.hp = max(0, min(hp, max_hp))

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0

    def apply_health(self, delta: int) -> int:
        """
        Add delta to health, clamped to [0, max_hp].

        Returns:
            int: The change actually applied after clamping.
        """
        old_hp = self.hp
        self.hp = max(0, min(self.max_hp, self.hp + delta))
        return self.hp - old_hp

    def __repr__(self):
        return f"PlayerState(hp={self.hp}/{self.max_hp}, x={self.pos.x:.1f})"
