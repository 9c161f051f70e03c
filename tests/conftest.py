"""
conftest.py
-----------
Shared pytest configuration and fixtures for the dodge game tests.

Contains:
- Headless SDL setup so pygame imports without a display or audio device
- Stub collaborators (asset registry, input) shared across modules
- Custom markers
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Headless pygame; must be set before pygame is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Allow running from a checkout without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dodge_game.core.debug.debug_logger import LoggerConfig  # noqa: E402
from dodge_game.core.services.event_manager import EventManager  # noqa: E402
from dodge_game.entities.falling_entity import FallingEntity  # noqa: E402
from dodge_game.entities.player_state import PlayerState  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging during tests."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Collaborator Stubs
# ===========================================================

@pytest.fixture
def mock_assets():
    """AssetRegistry stub that knows every key: each lookup returns a distinct handle."""
    assets = MagicMock()
    images = {}
    sounds = {}
    assets.get_image.side_effect = lambda category, key: images.setdefault((category, key), MagicMock(name=f"img:{key}"))
    assets.get_sound.side_effect = lambda category, key: sounds.setdefault((category, key), MagicMock(name=f"snd:{key}"))
    return assets


@pytest.fixture
def empty_assets():
    """AssetRegistry stub with nothing in it."""
    assets = MagicMock()
    assets.get_image.return_value = None
    assets.get_sound.return_value = None
    return assets


@pytest.fixture
def event_manager():
    return EventManager()


@pytest.fixture
def player():
    return PlayerState()


# ===========================================================
# Test Utilities
# ===========================================================

def _make_input(left=False, right=False):
    """Input stub exposing action_held() for the two movement actions."""
    held = {"move_left": left, "move_right": right}
    input_manager = MagicMock()
    input_manager.action_held.side_effect = lambda action: held.get(action, False)
    return input_manager


def _entity_on_player(kind, player, dx=0.0, dy=0.0):
    """FallingEntity centered on the player (plus an offset)."""
    return FallingEntity(kind, player.pos.x + dx, player.pos.y + dy)


@pytest.fixture
def make_input():
    return _make_input


@pytest.fixture
def entity_on_player():
    return _entity_on_player


@pytest.fixture
def idle_input():
    return _make_input()


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in item.keywords:
            continue
        item.add_marker(pytest.mark.unit)
