"""
game_settings.py
----------------
Centralized constants for all game systems.

World coordinates have their origin at the field center with +y pointing up;
the player walks along y = -300 and entities enter at y = +350.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Dodge"
    BACKGROUND_COLOR = (20, 20, 28)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Simulation step timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Player configuration defaults."""
    START_X: float = 0.0
    START_Y: float = -300.0
    SIZE = (40.0, 40.0)
    SPEED: float = 7.5            # pixels per tick
    MOVE_LIMIT_LEFT: float = -375.0
    MOVE_LIMIT_RIGHT: float = 375.0
    MAX_HP: int = 100
    COLOR = (235, 235, 235)


# ===========================================================
# Spawning
# ===========================================================

class Spawn:
    """Spawner timing and placement."""
    ENTITY_START_Y: float = 350.0
    ATTACK_FIRST_INTERVAL: float = 0.5
    ATTACK_INTERVAL_RANGE = (0.1, 0.3)
    ITEM_INTERVAL: float = 3.0


# ===========================================================
# Collision Outcomes
# ===========================================================

class Combat:
    """Health changes applied on contact."""
    ATTACK_DAMAGE: int = 10
    PORTION_HEAL: int = 10


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Field edges used for entity cleanup."""
    FIELD_BOTTOM: float = -Display.HEIGHT / 2
    CLEANUP_MARGIN: float = 0.0


# ===========================================================
# Assets & Audio
# ===========================================================

class Assets:
    """Asset directory layout, relative to the asset root."""
    ROOT: str = "assets"
    DAMAGE_SOUND_DIR: str = "audio/damage"
    ITEM_SOUND_DIR: str = "audio/item"
    ATTACK_IMAGE_DIR: str = "image/attack"
    ITEM_IMAGE_DIR: str = "image/item"
    SOUND_EXTENSION: str = ".ogg"
    IMAGE_EXTENSION: str = ".png"


class Audio:
    """Mixer defaults (0 - 100 levels)."""
    MASTER_LEVEL: int = 100
    EFFECT_LEVEL: int = 80


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    ITEMS: int = 100
    ATTACKS: int = 200
    PLAYER: int = 400


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
