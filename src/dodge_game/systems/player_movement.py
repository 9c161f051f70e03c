"""
player_movement.py
------------------
Horizontal player movement and field-boundary clamping.

Left and right are evaluated as two independent branches, so holding both
keys moves the player by +speed and -speed in the same tick (net zero).
"""

from dodge_game.core.runtime.game_settings import Player


def update_movement(player, input_manager, dt=None):
    """
    Move the player by its per-tick speed in each held direction.

    Args:
        player (PlayerState): The player being moved.
        input_manager: Anything exposing action_held(name).
        dt: Unused; speed is expressed per tick.
    """
    if input_manager.action_held("move_right"):
        player.pos.x += player.speed
    if input_manager.action_held("move_left"):
        player.pos.x -= player.speed

    clamp_to_field(player)


def clamp_to_field(player):
    player.pos.x = max(Player.MOVE_LIMIT_LEFT, min(player.pos.x, Player.MOVE_LIMIT_RIGHT))
