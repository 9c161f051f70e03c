"""
Runtime configuration exports.

Game-wide constants only; the session and loop are imported from their
own modules to keep this package import-light.
"""

from dodge_game.core.runtime.game_settings import (
    Display,
    Physics,
    Player,
    Spawn,
    Combat,
    Bounds,
    Assets,
    Audio,
    Layers,
    Debug,
)

__all__ = [
    "Display",
    "Physics",
    "Player",
    "Spawn",
    "Combat",
    "Bounds",
    "Assets",
    "Audio",
    "Layers",
    "Debug",
]
