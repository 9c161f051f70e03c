from dodge_game.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = ["DebugLogger", "LoggerConfig"]
