"""
Entity module exports.

Exports:
    EntityCategory  - ATTACK or ITEM
    EntityKind      - Closed set of spawnable variants with their static data
    FallingEntity   - Runtime record of one descending attack or item
    PlayerState     - Health and position of the player
"""

from dodge_game.entities.entity_kinds import EntityCategory, EntityKind
from dodge_game.entities.falling_entity import FallingEntity
from dodge_game.entities.player_state import PlayerState

__all__ = [
    "EntityCategory",
    "EntityKind",
    "FallingEntity",
    "PlayerState",
]
