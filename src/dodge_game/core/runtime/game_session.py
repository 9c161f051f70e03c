"""
game_session.py
---------------
One play session: the state it owns and the fixed order of passes that
advance it by a tick.

Tick order
----------
1. Player movement     (input -> player.pos.x)
2. Entity motion       (every entity falls by its speed)
3. Collision           (sees positions already advanced this tick)
4. Bottom cleanup      (entities that left the field)
5. Attack spawn timer  \\ new entities are appended last, so they are
6. Item spawn timer    /  never collision-tested in their spawn tick

The session holds no pygame objects beyond Vector2 and runs headless,
which is what the tests drive.
"""

from dataclasses import dataclass, field

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.session_stats import SessionStats
from dodge_game.core.services.event_manager import (
    EntityDespawnedEvent,
    EntitySpawnedEvent,
    EventManager,
    PlayerDefeatedEvent,
)
from dodge_game.entities.player_state import PlayerState
from dodge_game.systems import motion
from dodge_game.systems.collision.collision_manager import CollisionManager
from dodge_game.systems.player_movement import update_movement
from dodge_game.systems.spawning.spawn_manager import SpawnManager


@dataclass
class SessionState:
    """Everything a session mutates, passed explicitly to each pass."""
    player: PlayerState = field(default_factory=PlayerState)
    entities: list = field(default_factory=list)
    sound_queue: list = field(default_factory=list)
    stats: SessionStats = field(default_factory=SessionStats)
    defeated: bool = False


class GameSession:
    """Game loop driver for the simulation; one step() per fixed tick."""

    def __init__(self, asset_registry, spawn_manager=None, state=None, event_manager=None):
        """
        Args:
            asset_registry: Read-only image/sound lookup shared by spawning and collision.
            spawn_manager (optional): Prebuilt SpawnManager (tests inject timers through it).
            state (optional): Initial SessionState.
            event_manager (optional): Shared EventManager; a private one is made if omitted.
        """
        self.assets = asset_registry
        self.state = state or SessionState()
        self.events = event_manager or EventManager()
        self.spawner = spawn_manager or SpawnManager(asset_registry)
        self.collisions = CollisionManager(asset_registry, self.events)
        self.state.stats.bind(self.events)

    @property
    def player(self) -> PlayerState:
        return self.state.player

    @property
    def entities(self) -> list:
        return self.state.entities

    # ===========================================================
    # Tick
    # ===========================================================

    def step(self, input_manager, dt: float):
        """
        Advance the simulation by one tick.

        Returns:
            list[CollisionEffect]: Effects resolved this tick.
        """
        state = self.state
        if state.player is None:
            raise ValueError("GameSession.step() called without a player")

        update_movement(state.player, input_manager, dt)
        motion.advance(state.entities, dt)

        effects = self.collisions.resolve(state.player, state.entities)
        state.sound_queue.extend(effect.sound for effect in effects if effect.sound is not None)

        for entity in motion.despawn_out_of_field(state.entities):
            self.events.dispatch(EntityDespawnedEvent(entity.id, entity.kind))

        self._add_spawn(self.spawner.tick_attack_spawner(dt))
        self._add_spawn(self.spawner.tick_item_spawner(dt))

        state.stats.add_time(dt)
        self._check_defeat()
        return effects

    def _add_spawn(self, entity):
        if entity is None:
            return
        self.state.entities.append(entity)
        self.events.dispatch(EntitySpawnedEvent(entity.id, entity.kind, tuple(entity.pos)))

    def _check_defeat(self):
        state = self.state
        if state.defeated or not state.player.is_defeated:
            return
        state.defeated = True
        DebugLogger.state(f"Player defeated after {state.stats.run_time:.1f}s", category="game_state")
        self.events.dispatch(PlayerDefeatedEvent(state.stats.run_time))

    # ===========================================================
    # Side-Effect Queues
    # ===========================================================

    def drain_sounds(self) -> list:
        """Return and clear the sound handles queued since the last drain."""
        queued = self.state.sound_queue[:]
        self.state.sound_queue.clear()
        return queued

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def close(self):
        """End the session: drop every event subscriber."""
        released = self.events.get_subscriber_count()
        self.events.clear_all()
        DebugLogger.system(f"Session closed, released {released} subscribers", category="game_state")
