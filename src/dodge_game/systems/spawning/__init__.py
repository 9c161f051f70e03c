from dodge_game.systems.spawning.spawn_manager import SpawnManager
from dodge_game.systems.spawning.spawn_timer import SpawnTimer, RandomIntervalTimer

__all__ = ["SpawnManager", "SpawnTimer", "RandomIntervalTimer"]
