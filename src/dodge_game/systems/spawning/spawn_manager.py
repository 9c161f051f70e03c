"""
spawn_manager.py
----------------
Decides when and what to drop into the field.

Responsibilities
----------------
- Run an irregular attack barrage: the next interval is redrawn after
  every fire, so the cadence never settles.
- Run a steady item drop on a fixed interval.
- Pick a random kind of the right category and a random x inside the
  player's movement range; entities enter at the top of the field.
- Resolve the sprite through the AssetRegistry and skip the spawn when it
  is missing instead of failing.
"""

import random

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_settings import Player, Spawn
from dodge_game.entities.entity_kinds import (
    EntityCategory,
    image_key,
    random_attack_kind,
    random_item_kind,
)
from dodge_game.entities.falling_entity import FallingEntity
from dodge_game.systems.spawning.spawn_timer import RandomIntervalTimer, SpawnTimer


class SpawnManager:
    """Owns both spawn timers and builds new FallingEntity records."""

    def __init__(self, asset_registry,
                 attack_interval_range=Spawn.ATTACK_INTERVAL_RANGE,
                 attack_first_interval=Spawn.ATTACK_FIRST_INTERVAL,
                 item_interval=Spawn.ITEM_INTERVAL):
        """
        Args:
            asset_registry: Read-only source of sprites (get_image).
            attack_interval_range: (low, high) seconds for the attack redraw.
            attack_first_interval: Seconds before the first attack.
            item_interval: Fixed seconds between item drops.
        """
        self.assets = asset_registry
        self.attack_timer = RandomIntervalTimer(attack_interval_range, attack_first_interval)
        self.item_timer = SpawnTimer(item_interval)

        self._spawn_stats = {
            EntityCategory.ATTACK: {"spawned": 0, "skipped": 0},
            EntityCategory.ITEM: {"spawned": 0, "skipped": 0},
        }

        DebugLogger.init_entry("SpawnManager")
        DebugLogger.init_sub(
            f"Attack interval {attack_interval_range[0]:.2f}-{attack_interval_range[1]:.2f}s, "
            f"item every {item_interval:.1f}s"
        )

    # ===========================================================
    # Timer Ticks
    # ===========================================================

    def tick_attack_spawner(self, dt: float):
        """Advance the attack timer; return a new attack or None."""
        if not self.attack_timer.tick(dt):
            return None

        kind = random_attack_kind()
        image = self.assets.get_image(EntityCategory.ATTACK, image_key(kind))
        if image is None:
            self._spawn_stats[EntityCategory.ATTACK]["skipped"] += 1
            DebugLogger.trace(f"No image for {kind.name}, attack skipped", category="entity_spawn")
            return None

        return self._create(kind, image)

    def tick_item_spawner(self, dt: float):
        """Advance the item timer; return a new item or None."""
        if not self.item_timer.tick(dt):
            return None

        kind = random_item_kind()
        image = self.assets.get_image(EntityCategory.ITEM, image_key(kind))
        if image is None:
            self._spawn_stats[EntityCategory.ITEM]["skipped"] += 1
            DebugLogger.warn(
                f"image_key '{image_key(kind)}' for {kind.name} not found, item skipped",
                category="entity_spawn"
            )
            return None

        return self._create(kind, image)

    # ===========================================================
    # Creation
    # ===========================================================

    def _create(self, kind, image) -> FallingEntity:
        x = random.uniform(Player.MOVE_LIMIT_LEFT, Player.MOVE_LIMIT_RIGHT)
        entity = FallingEntity(kind, x, Spawn.ENTITY_START_Y, image=image)
        self._spawn_stats[entity.category]["spawned"] += 1

        DebugLogger.trace(f"Spawned {entity!r}", category="entity_spawn")
        return entity

    def get_stats(self) -> dict:
        return {category.value: dict(stats) for category, stats in self._spawn_stats.items()}
