"""
game_loop.py
------------
Defines the GameLoop class that owns the pygame window and drives a
GameSession at a fixed timestep.

Responsibilities
----------------
- Initialize pygame, the window and the collaborators (assets, input, audio, drawing)
- Maintain the frame loop (events -> fixed-step simulation -> sounds -> render)
- Close on window close or Escape
"""

import pygame

from dodge_game.assets.asset_registry import AssetRegistry
from dodge_game.audio.sound_manager import SoundManager
from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_session import GameSession
from dodge_game.core.runtime.game_settings import Assets, Audio, Display, Physics, Spawn
from dodge_game.core.services.config_manager import load_config
from dodge_game.core.services.input_manager import InputManager
from dodge_game.graphics.draw_manager import DrawManager
from dodge_game.systems.spawning.spawn_manager import SpawnManager


DEFAULT_CONFIG = {
    "assets": {
        "root": Assets.ROOT,
    },
    "spawn": {
        "attack_first_interval": Spawn.ATTACK_FIRST_INTERVAL,
        "attack_interval_range": list(Spawn.ATTACK_INTERVAL_RANGE),
        "item_interval": Spawn.ITEM_INTERVAL,
    },
    "audio": {
        "master_level": Audio.MASTER_LEVEL,
        "effect_level": Audio.EFFECT_LEVEL,
    },
}


class GameLoop:
    """Core runtime controller for the windowed game."""

    def __init__(self, config_file="game.json", asset_root=None):
        """
        Initialize pygame and every collaborator.

        Args:
            config_file: JSON overrides for DEFAULT_CONFIG.
            asset_root (optional): Overrides the configured asset directory.

        Raises:
            FileNotFoundError: A required asset directory is missing; raised
                before the window opens.
        """
        DebugLogger.section("Initializing GameLoop")
        self.config = load_config(config_file, DEFAULT_CONFIG)
        if asset_root is not None:
            self.config["assets"]["root"] = asset_root

        self.assets = AssetRegistry(self.config["assets"]["root"]).load()

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}, fixed size")

        audio_cfg = self.config["audio"]
        self.sound_manager = SoundManager(audio_cfg["master_level"], audio_cfg["effect_level"])
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()

        spawn_cfg = self.config["spawn"]
        spawner = SpawnManager(
            self.assets,
            attack_interval_range=tuple(spawn_cfg["attack_interval_range"]),
            attack_first_interval=spawn_cfg["attack_first_interval"],
            item_interval=spawn_cfg["item_interval"],
        )
        self.session = GameSession(self.assets, spawn_manager=spawner)
        self.draw_manager.bind(self.session.events)

        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Run until the window is closed or Escape is pressed."""
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            frame_time = min(self.clock.tick(Display.FPS) / 1000.0, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt and self.running:
                self.input_manager.update()
                if self.input_manager.quit_requested:
                    self.running = False
                    break
                self.session.step(self.input_manager, fixed_dt)
                accumulator -= fixed_dt

            for handle in self.session.drain_sounds():
                self.sound_manager.play_once(handle)

            self.draw_manager.update_shake(frame_time)
            self._draw()

        DebugLogger.system(f"Session summary: {self.session.state.stats.summary()}")
        self.session.close()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")

    def _draw(self):
        self.draw_manager.clear()
        for entity in self.session.entities:
            self.draw_manager.queue_entity(entity)
        self.draw_manager.queue_player(self.session.player)

        self.draw_manager.render(self.screen)
        pygame.display.flip()
