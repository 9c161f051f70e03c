"""
Core services exports.

Provides the event system and configuration loading.
"""

from dodge_game.core.services.config_manager import load_config
from dodge_game.core.services.event_manager import (
    EventManager,
    BaseEvent,
    PlayerDamagedEvent,
    ItemCollectedEvent,
    EntitySpawnedEvent,
    EntityDespawnedEvent,
    PlayerDefeatedEvent,
)

__all__ = [
    # Config
    "load_config",
    # Events
    "EventManager",
    "BaseEvent",
    "PlayerDamagedEvent",
    "ItemCollectedEvent",
    "EntitySpawnedEvent",
    "EntityDespawnedEvent",
    "PlayerDefeatedEvent",
]
