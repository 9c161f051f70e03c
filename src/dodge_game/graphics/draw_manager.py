"""
draw_manager.py
---------------
Layered sprite rendering for the play-field.

Responsibilities:
- Convert world coordinates (origin at field center, +y up) to screen pixels
- Scale and cache sprites per target size
- Maintain a layered draw queue and blit it once per frame
- Shake the view briefly when the player takes damage
"""

import math

import pygame

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_settings import Display, Layers, Debug, Player
from dodge_game.core.services.event_manager import PlayerDamagedEvent
from dodge_game.entities.entity_kinds import EntityCategory


FALLBACK_COLORS = {
    EntityCategory.ATTACK: (220, 60, 60),
    EntityCategory.ITEM: (60, 200, 90),
}


class DrawManager:
    """Collects draw calls during a frame and renders them in layer order."""

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT):
        self.width = width
        self.height = height

        self._scaled_cache = {}     # {(id(image), w, h): surface}
        self.surface_layers = {}    # {layer: [(surface, rect), ...]}
        self.rect_layers = {}       # {layer: [(rect, color), ...]}
        self.debug_hitboxes = []

        self.shake_offset = (0, 0)
        self.shake_timer = 0.0
        self.shake_intensity = 0.0
        self.shake_duration = 0.0

        DebugLogger.init_entry("DrawManager")

    def bind(self, event_manager):
        """React to session events with visual effects."""
        event_manager.subscribe(PlayerDamagedEvent, self._on_player_damaged)
        return self

    # ===========================================================
    # Coordinates
    # ===========================================================

    def world_to_screen(self, pos, size) -> pygame.Rect:
        """Screen rect for a world-space center and full size."""
        w, h = int(size[0]), int(size[1])
        cx = self.width / 2 + pos[0]
        cy = self.height / 2 - pos[1]
        rect = pygame.Rect(0, 0, w, h)
        rect.center = (round(cx), round(cy))
        return rect

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for a new frame."""
        for items in self.surface_layers.values():
            items.clear()
        for items in self.rect_layers.values():
            items.clear()
        self.debug_hitboxes.clear()

    def queue_sprite(self, image, pos, size, layer=0, fallback_color=(255, 255, 255)):
        """
        Queue a sprite centered at a world position, scaled to size.

        A missing image is drawn as a filled rectangle of fallback_color.
        """
        rect = self.world_to_screen(pos, size)
        if image is None:
            self.rect_layers.setdefault(layer, []).append((rect, fallback_color))
        else:
            self.surface_layers.setdefault(layer, []).append((self._scaled(image, rect.size), rect))

        if Debug.HITBOX_VISIBLE:
            self.debug_hitboxes.append(rect)

    def queue_entity(self, entity):
        layer = Layers.ATTACKS if entity.category is EntityCategory.ATTACK else Layers.ITEMS
        self.queue_sprite(entity.image, entity.pos, entity.scale, layer,
                          fallback_color=FALLBACK_COLORS[entity.category])

    def queue_player(self, player, image=None, color=Player.COLOR):
        self.queue_sprite(image, player.pos, player.size, Layers.PLAYER, fallback_color=color)

    def _scaled(self, image, size):
        key = (id(image), size[0], size[1])
        surface = self._scaled_cache.get(key)
        if surface is None:
            surface = pygame.transform.scale(image, size)
            self._scaled_cache[key] = surface
        return surface

    # ===========================================================
    # Screen Shake
    # ===========================================================

    def _on_player_damaged(self, event):
        self.trigger_shake()

    def trigger_shake(self, intensity=6.0, duration=0.2):
        self.shake_intensity = intensity
        self.shake_duration = duration
        self.shake_timer = duration

    def update_shake(self, dt):
        if self.shake_timer > 0:
            self.shake_timer = max(self.shake_timer - dt, 0.0)
            t = self.shake_timer / self.shake_duration if self.shake_duration > 0 else 0
            self.shake_offset = (
                int(math.sin(self.shake_timer * 50) * self.shake_intensity * t),
                int(math.cos(self.shake_timer * 40) * self.shake_intensity * t),
            )
        else:
            self.shake_offset = (0, 0)

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Blit every queued layer onto target_surface, lowest layer first."""
        target_surface.fill(Display.BACKGROUND_COLOR)
        offset = self.shake_offset

        for layer in sorted(set(self.surface_layers) | set(self.rect_layers)):
            for rect, color in self.rect_layers.get(layer, ()):
                pygame.draw.rect(target_surface, color, rect.move(offset))
            items = self.surface_layers.get(layer)
            if items:
                target_surface.blits([(surf, rect.move(offset)) for surf, rect in items])

        for rect in self.debug_hitboxes:
            pygame.draw.rect(target_surface, (255, 255, 0), rect.move(offset), 1)

        DebugLogger.trace(
            f"Rendered {sum(len(v) for v in self.surface_layers.values())} sprites",
            category="drawing"
        )
