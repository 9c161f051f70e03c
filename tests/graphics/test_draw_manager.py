"""
test_draw_manager.py
--------------------
Tests for coordinate conversion, draw queues and screen shake.
"""

import pygame
import pytest

from dodge_game.core.runtime.game_settings import Layers, Player
from dodge_game.core.services.event_manager import ItemCollectedEvent, PlayerDamagedEvent
from dodge_game.entities.entity_kinds import EntityKind
from dodge_game.entities.falling_entity import FallingEntity
from dodge_game.graphics.draw_manager import FALLBACK_COLORS, DrawManager


@pytest.fixture
def draw_manager():
    return DrawManager(width=800, height=720)


@pytest.mark.parametrize(
    "pos, size, center",
    [
        ((0, 0), (40, 40), (400, 360)),
        ((0, -300), (40, 40), (400, 660)),
        ((-375, 350), (25, 25), (25, 10)),
    ]
)
def test_world_to_screen(draw_manager, pos, size, center):
    rect = draw_manager.world_to_screen(pos, size)
    assert rect.center == center
    assert rect.size == size


def test_missing_image_queues_fallback_rect(draw_manager):
    entity = FallingEntity(EntityKind.ATTACK_NORMAL, 0.0, 0.0)
    draw_manager.queue_entity(entity)

    [(rect, color)] = draw_manager.rect_layers[Layers.ATTACKS]
    assert color == FALLBACK_COLORS[entity.category]
    assert rect.size == (25, 25)


def test_image_is_scaled_once(draw_manager):
    image = pygame.Surface((8, 8))
    for x in (0.0, 50.0):
        draw_manager.queue_entity(FallingEntity(EntityKind.ITEM_BIG, x, 0.0, image=image))

    surfaces = [surf for surf, _ in draw_manager.surface_layers[Layers.ITEMS]]
    assert surfaces[0] is surfaces[1]
    assert surfaces[0].get_size() == (45, 45)


def test_clear_empties_queues(draw_manager, player):
    draw_manager.queue_player(player)
    draw_manager.clear()
    assert all(not items for items in draw_manager.rect_layers.values())


def test_render_draws_queued_layers(draw_manager, player):
    target = pygame.Surface((800, 720))
    draw_manager.queue_player(player, color=(10, 20, 30))

    draw_manager.render(target)

    assert tuple(target.get_at((400, 660)))[:3] == (10, 20, 30)


class TestShake:

    def test_damage_event_triggers_shake(self, draw_manager, event_manager):
        draw_manager.bind(event_manager)
        event_manager.dispatch(PlayerDamagedEvent(EntityKind.ATTACK_NORMAL, -10, 90))
        assert draw_manager.shake_timer > 0

    def test_item_event_does_not_shake(self, draw_manager, event_manager):
        draw_manager.bind(event_manager)
        event_manager.dispatch(ItemCollectedEvent(EntityKind.ITEM_PORTION, 10, 100))
        assert draw_manager.shake_timer == 0

    def test_shake_settles(self, draw_manager):
        draw_manager.trigger_shake(intensity=6.0, duration=0.2)
        for _ in range(20):
            draw_manager.update_shake(1 / 60)
        draw_manager.update_shake(1 / 60)

        assert draw_manager.shake_timer == 0
        assert draw_manager.shake_offset == (0, 0)


def test_player_uses_configured_color(draw_manager, player):
    draw_manager.queue_player(player)

    [(rect, color)] = draw_manager.rect_layers[Layers.PLAYER]
    assert color == Player.COLOR
    assert rect.center == (400, 660)
