"""
collision_manager.py
--------------------
Player-versus-entity collision pass.

Responsibilities
----------------
- Test the player's AABB against every active entity (no broad phase;
  entity counts stay small).
- On contact, run the kind's effect handler, look up its sound and record
  a CollisionEffect describing what happened.
- Apply the summed health change once, clamped, so the outcome does not
  depend on the order entities are stored in.
- Remove every entity that touched the player.
"""

from dataclasses import dataclass

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.services.event_manager import ItemCollectedEvent, PlayerDamagedEvent
from dodge_game.entities.entity_kinds import EntityCategory, EntityKind, sound_key
from dodge_game.systems.collision.collider import Collider
from dodge_game.systems.collision.effect_handlers import get_handler


# ===========================================================
# Effect Records
# ===========================================================

@dataclass(frozen=True)
class CollisionEffect:
    """Outcome of one entity touching the player."""
    kind: EntityKind
    entity_id: int
    amount: int
    sound: object = None


@dataclass(frozen=True)
class DamagePlayer(CollisionEffect):
    pass


@dataclass(frozen=True)
class ApplyItem(CollisionEffect):
    pass


# ===========================================================
# Collision Manager
# ===========================================================

class CollisionManager:
    """Detects player contacts and resolves them in one synchronous pass."""

    def __init__(self, asset_registry, event_manager=None):
        """
        Args:
            asset_registry: Read-only source of sounds (get_sound).
            event_manager (optional): Receives PlayerDamagedEvent / ItemCollectedEvent.
        """
        self.assets = asset_registry
        self.events = event_manager
        DebugLogger.init_entry("CollisionManager")

    def resolve(self, player, entities):
        """
        Resolve all contacts for this tick.

        Args:
            player (PlayerState): Mutated through apply_health().
            entities (list): Active entities; touched ones are removed in place.

        Returns:
            list[CollisionEffect]: One per touched entity, in storage order.
        """
        if not entities:
            return []

        player_box = Collider.of_player(player)
        effects = []
        hit_ids = set()

        for entity in entities:
            if not player_box.overlaps(Collider.of_entity(entity)):
                continue

            effects.append(self._build_effect(player, entity))
            hit_ids.add(entity.id)

        if not effects:
            return effects

        entities[:] = [e for e in entities if e.id not in hit_ids]

        total = sum(effect.amount for effect in effects)
        applied = player.apply_health(total)
        DebugLogger.trace(
            f"{len(effects)} contact(s), hp {total:+d} requested, {applied:+d} applied -> {player.hp}",
            category="collision"
        )

        self._dispatch(effects, player)
        return effects

    # ===========================================================
    # Per-Entity Resolution
    # ===========================================================

    def _build_effect(self, player, entity) -> CollisionEffect:
        kind = entity.kind
        amount = get_handler(kind)(player, kind)
        sound = self.assets.get_sound(entity.category, sound_key(kind))

        if entity.category is EntityCategory.ATTACK:
            if sound is None:
                DebugLogger.trace(f"No damage sound '{sound_key(kind)}'", category="collision")
            return DamagePlayer(kind, entity.id, amount, sound)

        if sound is None:
            DebugLogger.warn(f"Sound key '{sound_key(kind)}' not found", category="item")
        return ApplyItem(kind, entity.id, amount, sound)

    def _dispatch(self, effects, player):
        if self.events is None:
            return

        for effect in effects:
            if isinstance(effect, DamagePlayer):
                self.events.dispatch(PlayerDamagedEvent(effect.kind, effect.amount, player.hp))
            else:
                self.events.dispatch(ItemCollectedEvent(effect.kind, effect.amount, player.hp))
