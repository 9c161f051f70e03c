"""
effect_handlers.py
------------------
Per-kind reactions to the player touching a falling entity.

Each handler receives the player and the kind and returns the health change
it requests. Handlers never write player.hp themselves; the collision pass
sums the requests and applies them once, clamped.
"""

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_settings import Combat
from dodge_game.entities.entity_kinds import EntityKind


EFFECT_HANDLERS = {}


def effect_handler(*kinds):
    """Decorator to register a handler for one or more kinds."""
    def decorator(func):
        for kind in kinds:
            EFFECT_HANDLERS[kind] = func
        return func
    return decorator


def get_handler(kind):
    try:
        return EFFECT_HANDLERS[kind]
    except KeyError:
        raise KeyError(f"No effect handler registered for {kind!r}") from None


# ===========================================================
# Attacks
# ===========================================================

@effect_handler(EntityKind.ATTACK_NORMAL, EntityKind.ATTACK_FIRST)
def handle_attack(player, kind) -> int:
    return -Combat.ATTACK_DAMAGE


# ===========================================================
# Items
# ===========================================================

@effect_handler(EntityKind.ITEM_PORTION)
def handle_portion(player, kind) -> int:
    """Heal; the ceiling is enforced when the pass applies the total."""
    return Combat.PORTION_HEAL


@effect_handler(EntityKind.ITEM_SPEED_UP)
def handle_speed_up(player, kind) -> int:
    DebugLogger.trace("Speed-up collected (no effect yet)", category="item")
    return 0


@effect_handler(EntityKind.ITEM_BIG)
def handle_big(player, kind) -> int:
    DebugLogger.trace("Big collected (no effect yet)", category="item")
    return 0
