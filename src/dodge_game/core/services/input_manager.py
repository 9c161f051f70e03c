"""
input_manager.py
----------------
Keyboard polling with named actions and edge detection.

The simulation only asks whether "move_left" / "move_right" are held;
"quit" is read by the GameLoop to close the window on Escape.
"""

import pygame

from dodge_game.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "quit": [pygame.K_ESCAPE],
}


class InputManager:
    """
    Polls the keyboard once per tick.

    Usage:
        input_manager.update()
        if input_manager.action_held("move_right"):
            ...
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [pygame key codes]}; defaults to DEFAULT_KEY_BINDINGS.
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._actions = {
            action: {"pressed": False, "held": False}
            for action in self.key_bindings
        }
        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """Rising edge this tick."""
        state = self._actions.get(action)
        return state["pressed"] if state else False

    def action_held(self, action: str) -> bool:
        """Any bound key is down this tick."""
        state = self._actions.get(action)
        return state["held"] if state else False

    @property
    def quit_requested(self) -> bool:
        return self.action_pressed("quit")

    # ===========================================================
    # Tick Update
    # ===========================================================

    def update(self, keys=None):
        """
        Refresh all action states.

        Args:
            keys: Key-state sequence indexed by key code; defaults to
                pygame.key.get_pressed().
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        for action, state in self._actions.items():
            held = self._is_action_down(action, keys)
            state["pressed"] = held and not state["held"]
            state["held"] = held

        DebugLogger.trace(
            f"left={self.action_held('move_left')} right={self.action_held('move_right')}",
            category="input"
        )

    def _is_action_down(self, action: str, keys) -> bool:
        for key in self.key_bindings.get(action, ()):
            if keys[key]:
                return True
        return False
