"""
test_session_stats.py
---------------------
Tests for event-driven session counters.
"""

from dodge_game.core.runtime.session_stats import SessionStats
from dodge_game.core.services.event_manager import (
    EntityDespawnedEvent,
    EntitySpawnedEvent,
    ItemCollectedEvent,
    PlayerDamagedEvent,
)
from dodge_game.entities.entity_kinds import EntityKind


def test_counters_follow_events(event_manager):
    stats = SessionStats().bind(event_manager)

    event_manager.dispatch(EntitySpawnedEvent(1, EntityKind.ATTACK_FIRST, (0.0, 350.0)))
    event_manager.dispatch(EntitySpawnedEvent(2, EntityKind.ITEM_BIG, (10.0, 350.0)))
    event_manager.dispatch(PlayerDamagedEvent(EntityKind.ATTACK_FIRST, -10, 90))
    event_manager.dispatch(ItemCollectedEvent(EntityKind.ITEM_BIG, 0, 90))
    event_manager.dispatch(EntityDespawnedEvent(3, EntityKind.ATTACK_NORMAL))

    summary = stats.summary()
    assert summary["attacks_spawned"] == 1
    assert summary["items_spawned"] == 1
    assert summary["hits_taken"] == 1
    assert summary["items_collected"] == 1
    assert summary["entities_dodged"] == 1


def test_time_and_reset():
    stats = SessionStats()
    stats.add_time(0.5)
    stats.add_time(0.25)
    assert stats.summary()["run_time"] == 0.75
    assert stats.ticks == 2

    stats.reset()
    assert stats.summary() == {
        "run_time": 0,
        "ticks": 0,
        "hits_taken": 0,
        "items_collected": 0,
        "attacks_spawned": 0,
        "items_spawned": 0,
        "entities_dodged": 0,
    }
