from .engine import GameEngine
from .errors import ConfigError, SnakeError
from .state import DOWN, LEFT, RIGHT, STOPPED, UP, Snapshot, StepResult

__all__ = [
    "GameEngine",
    "ConfigError",
    "SnakeError",
    "Snapshot",
    "StepResult",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "STOPPED",
]
