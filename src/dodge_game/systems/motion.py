"""
motion.py
---------
Per-tick descent of falling entities and cleanup of those below the field.
"""

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_settings import Bounds
from dodge_game.entities.entity_kinds import speed


def advance(entities, dt=None):
    """
    Move every entity down by its kind's speed.

    Speed is a distance per fixed tick, so dt is accepted for call-site
    symmetry with the other passes but not used.
    """
    for entity in entities:
        entity.pos.y -= speed(entity.kind)


def despawn_out_of_field(entities, bottom=Bounds.FIELD_BOTTOM, margin=Bounds.CLEANUP_MARGIN):
    """
    Remove entities that are entirely below the field bottom.

    Args:
        entities (list): Active entity list, edited in place.
        bottom (float): World y of the field's bottom edge.
        margin (float): Extra distance an entity may fall past the edge.

    Returns:
        list: The removed entities.
    """
    limit = bottom - margin
    removed = [e for e in entities if e.top < limit]
    if removed:
        entities[:] = [e for e in entities if e.top >= limit]
        DebugLogger.trace(f"Despawned {len(removed)} off-field entities", category="entity_cleanup")
    return removed
