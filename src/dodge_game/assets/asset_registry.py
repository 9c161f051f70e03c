"""
asset_registry.py
-----------------
Indexes the game's images and sounds by filename stem.

Responsibilities
----------------
- Scan the fixed asset directories at startup and fail loudly if one is missing.
- Map (category, key) to a file path, where key is the filename stem.
- Load pygame handles lazily on first request and cache them.

Directory layout (relative to the asset root):
    audio/damage/*.ogg   -> sounds for attacks
    audio/item/*.ogg     -> sounds for items
    image/attack/*.png   -> sprites for attacks
    image/item/*.png     -> sprites for items
"""

import os

import pygame

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_settings import Assets
from dodge_game.entities.entity_kinds import EntityCategory


class AssetRegistry:
    """Read-only lookup of image and sound handles for the simulation."""

    SOUND_DIRS = {
        EntityCategory.ATTACK: Assets.DAMAGE_SOUND_DIR,
        EntityCategory.ITEM: Assets.ITEM_SOUND_DIR,
    }
    IMAGE_DIRS = {
        EntityCategory.ATTACK: Assets.ATTACK_IMAGE_DIR,
        EntityCategory.ITEM: Assets.ITEM_IMAGE_DIR,
    }

    def __init__(self, root: str = Assets.ROOT, image_loader=None, sound_loader=None):
        """
        Args:
            root: Directory holding the audio/ and image/ trees.
            image_loader: Callable(path) -> handle; defaults to pygame.image.load.
            sound_loader: Callable(path) -> handle; defaults to pygame.mixer.Sound.
        """
        self.root = root
        self._image_loader = image_loader or _load_image
        self._sound_loader = sound_loader or pygame.mixer.Sound

        self._image_paths = {category: {} for category in EntityCategory}
        self._sound_paths = {category: {} for category in EntityCategory}
        self._image_cache = {}
        self._sound_cache = {}

    # ===========================================================
    # Startup Scan
    # ===========================================================

    def load(self):
        """
        Index every asset directory.

        Raises:
            FileNotFoundError: A required directory does not exist.
        """
        for category, directory in self.SOUND_DIRS.items():
            self._sound_paths[category] = self._scan(directory, Assets.SOUND_EXTENSION)
        for category, directory in self.IMAGE_DIRS.items():
            self._image_paths[category] = self._scan(directory, Assets.IMAGE_EXTENSION)

        DebugLogger.init_entry("AssetRegistry")
        for category in EntityCategory:
            DebugLogger.init_sub(
                f"{category.value}: {len(self._image_paths[category])} images, "
                f"{len(self._sound_paths[category])} sounds"
            )
        return self

    def _scan(self, directory: str, extension: str) -> dict:
        path = os.path.join(self.root, directory)
        if not os.path.isdir(path):
            raise FileNotFoundError(f"Asset directory not found: {path}")

        found = {}
        for filename in sorted(os.listdir(path)):
            stem, ext = os.path.splitext(filename)
            if ext.lower() == extension:
                found[stem] = os.path.join(path, filename)
        DebugLogger.system(f"Indexed {len(found)} '{extension}' files in {path}", category="loading")
        return found

    # ===========================================================
    # Lookups
    # ===========================================================

    def get_image(self, category: EntityCategory, key: str):
        """Return the sprite for key, or None if no such file was indexed."""
        return self._get(self._image_paths, self._image_cache, self._image_loader, category, key)

    def get_sound(self, category: EntityCategory, key: str):
        """Return the sound for key, or None if no such file was indexed."""
        return self._get(self._sound_paths, self._sound_cache, self._sound_loader, category, key)

    def _get(self, paths, cache, loader, category, key):
        path = paths[category].get(key)
        if path is None:
            return None

        if path not in cache:
            try:
                cache[path] = loader(path)
            except (pygame.error, OSError) as e:
                DebugLogger.warn(f"Failed loading {path}: {e}", category="loading")
                return None
            DebugLogger.trace(f"Loaded '{key}' from {path}", category="loading")
        return cache[path]


def _load_image(path):
    image = pygame.image.load(path)
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image
