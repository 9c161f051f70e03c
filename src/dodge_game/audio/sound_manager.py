"""
sound_manager.py
----------------
Audio sink for one-shot effect sounds.

Handles come from the AssetRegistry; play_once() applies the current
effect volume and fires the sound on a free mixer channel. pygame releases
the channel when playback ends.
"""

import pygame

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_settings import Audio


class SoundManager:

    def __init__(self, master_level: int = Audio.MASTER_LEVEL, effect_level: int = Audio.EFFECT_LEVEL,
                 init_mixer: bool = True):
        self.enabled = True
        if init_mixer:
            try:
                pygame.mixer.init()
            except pygame.error as e:
                # No audio device: keep running silently
                DebugLogger.warn(f"Mixer unavailable, sound disabled: {e}", category="audio")
                self.enabled = False

        self.master_level = master_level
        self.effect_level = effect_level
        self.master_volume = self.volume_scale(master_level)
        self.effect_volume = self.volume_scale(effect_level)
        self.played = 0

        DebugLogger.init_entry("SoundManager", "OK" if self.enabled else "FAIL")

    def volume_scale(self, level):
        """Map a 0 - 100 UI level onto a squared 0.0 - 1.0 volume."""
        if level <= 0:
            return 0.0
        return min((level / 100) ** 2, 1.0)

    def play_once(self, handle):
        """Fire-and-forget playback of a sound handle."""
        if not self.enabled or handle is None:
            return
        handle.set_volume(self.master_volume * self.effect_volume)
        handle.play()
        self.played += 1
        DebugLogger.trace(f"Playing sound #{self.played}", category="audio")
