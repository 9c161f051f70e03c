"""
session_stats.py
----------------
Tracks statistics for the current game session, fed by session events.
"""

from dodge_game.core.services.event_manager import (
    EntityDespawnedEvent,
    EntitySpawnedEvent,
    ItemCollectedEvent,
    PlayerDamagedEvent,
)
from dodge_game.entities.entity_kinds import EntityCategory


class SessionStats:
    """Container for run-specific counters. Reset when a new session starts."""

    def __init__(self):
        self.reset()

    def bind(self, event_manager):
        """Subscribe the counters to a session's events."""
        event_manager.subscribe(PlayerDamagedEvent, self._on_damaged)
        event_manager.subscribe(ItemCollectedEvent, self._on_item)
        event_manager.subscribe(EntitySpawnedEvent, self._on_spawned)
        event_manager.subscribe(EntityDespawnedEvent, self._on_despawned)
        return self

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def _on_damaged(self, event: PlayerDamagedEvent):
        self.hits_taken += 1

    def _on_item(self, event: ItemCollectedEvent):
        self.items_collected += 1

    def _on_spawned(self, event: EntitySpawnedEvent):
        if event.kind.category is EntityCategory.ATTACK:
            self.attacks_spawned += 1
        else:
            self.items_spawned += 1

    def _on_despawned(self, event: EntityDespawnedEvent):
        self.entities_dodged += 1

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_time(self, dt: float):
        self.run_time += dt
        self.ticks += 1

    def summary(self) -> dict:
        return {
            "run_time": round(self.run_time, 2),
            "ticks": self.ticks,
            "hits_taken": self.hits_taken,
            "items_collected": self.items_collected,
            "attacks_spawned": self.attacks_spawned,
            "items_spawned": self.items_spawned,
            "entities_dodged": self.entities_dodged,
        }

    def reset(self):
        self.run_time = 0.0
        self.ticks = 0
        self.hits_taken = 0
        self.items_collected = 0
        self.attacks_spawned = 0
        self.items_spawned = 0
        self.entities_dodged = 0
