"""
event_manager.py
----------------
Pub-sub dispatcher so collision outcomes can reach audio, visuals and
statistics without the collision pass knowing about any of them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from dodge_game.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class PlayerDamagedEvent(BaseEvent):
    """Dispatched when an attack touches the player."""
    kind: object
    amount: int
    hp: int


@dataclass(frozen=True)
class ItemCollectedEvent(BaseEvent):
    """Dispatched when the player picks up an item."""
    kind: object
    amount: int
    hp: int


@dataclass(frozen=True)
class EntitySpawnedEvent(BaseEvent):
    """Dispatched when a falling entity enters the field."""
    entity_id: int
    kind: object
    position: tuple


@dataclass(frozen=True)
class EntityDespawnedEvent(BaseEvent):
    """Dispatched when a falling entity leaves through the field bottom."""
    entity_id: int
    kind: object


@dataclass(frozen=True)
class PlayerDefeatedEvent(BaseEvent):
    """Dispatched once, on the tick health first reaches zero."""
    run_time: float


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using the pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when the event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, "__name__", repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send an event to every callback registered for its exact type.

        A callback that raises is logged and skipped; the remaining
        callbacks still run.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, "__name__", repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    def clear_all(self) -> None:
        """Remove all subscribers. Call when a session ends."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
