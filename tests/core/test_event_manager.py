"""
test_event_manager.py
---------------------
Tests for the pub-sub EventManager.
"""

from unittest.mock import MagicMock, patch

import pytest

from dodge_game.core.services.event_manager import (
    EntitySpawnedEvent,
    ItemCollectedEvent,
    PlayerDamagedEvent,
)
from dodge_game.entities.entity_kinds import EntityKind


@pytest.fixture
def damaged_event():
    return PlayerDamagedEvent(EntityKind.ATTACK_NORMAL, -10, 90)


def test_dispatch_reaches_subscribers(event_manager, damaged_event):
    callback = MagicMock()
    event_manager.subscribe(PlayerDamagedEvent, callback)

    event_manager.dispatch(damaged_event)

    callback.assert_called_once_with(damaged_event)


def test_dispatch_matches_exact_type(event_manager, damaged_event):
    callback = MagicMock()
    event_manager.subscribe(ItemCollectedEvent, callback)

    event_manager.dispatch(damaged_event)

    callback.assert_not_called()


def test_subscribe_ignores_duplicates(event_manager):
    callback = MagicMock()
    event_manager.subscribe(PlayerDamagedEvent, callback)
    event_manager.subscribe(PlayerDamagedEvent, callback)
    assert event_manager.get_subscriber_count(PlayerDamagedEvent) == 1


def test_failing_callback_does_not_stop_dispatch(event_manager, damaged_event):
    broken = MagicMock(side_effect=RuntimeError("boom"))
    healthy = MagicMock()
    event_manager.subscribe(PlayerDamagedEvent, broken)
    event_manager.subscribe(PlayerDamagedEvent, healthy)

    with patch("dodge_game.core.services.event_manager.DebugLogger.warn") as mock_warn:
        event_manager.dispatch(damaged_event)

    healthy.assert_called_once_with(damaged_event)
    mock_warn.assert_called_once()
    assert "boom" in mock_warn.call_args[0][0]


def test_clear_all(event_manager):
    event_manager.subscribe(PlayerDamagedEvent, MagicMock())
    event_manager.subscribe(EntitySpawnedEvent, MagicMock())
    assert event_manager.get_subscriber_count() == 2

    event_manager.clear_all()

    assert event_manager.get_subscriber_count() == 0


def test_events_are_frozen(damaged_event):
    with pytest.raises(AttributeError):
        damaged_event.hp = 0
