"""
test_collider.py
----------------
Tests for AABB construction and the strict overlap test.
"""

import pytest

from dodge_game.entities.entity_kinds import EntityKind
from dodge_game.entities.falling_entity import FallingEntity
from dodge_game.systems.collision.collider import Collider


def test_edges_from_center_and_size():
    box = Collider((10, 20), (40, 30))
    assert (box.left, box.right) == (-10, 30)
    assert (box.bottom, box.top) == (5, 35)


@pytest.mark.parametrize(
    "other_center, expected",
    [
        ((0, 0), True),
        ((39.9, 0), True),
        ((40, 0), False),      # edges touch on x
        ((0, -40), False),     # edges touch on y
        ((0, 39.9), True),
        ((100, 100), False),
    ]
)
def test_overlap_is_strict(other_center, expected):
    a = Collider((0, 0), (40, 40))
    b = Collider(other_center, (40, 40))
    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_of_player_uses_player_size(player):
    box = Collider.of_player(player)
    assert box.right - box.left == player.size.x
    assert box.center == player.pos


def test_of_entity_uses_kind_scale():
    entity = FallingEntity(EntityKind.ITEM_BIG, 0.0, 0.0)
    box = Collider.of_entity(entity)
    assert box.top - box.bottom == 45


def test_collider_copies_position(player):
    box = Collider.of_player(player)
    player.pos.x += 100
    assert box.center.x == 0
