from .bird import Bird
from .collision import check_collision
from .config import DESKTOP, MOBILE, ConfigError, GameConfig, load_config, select_profile
from .difficulty import DifficultyState, compute_difficulty
from .driver import FrameDriver
from .obstacles import Obstacle, ObstacleStream
from .session import GameSession, GameState, InvalidTransition, RoundState, SessionListener

__all__ = [
    'Bird', 'check_collision', 'DESKTOP', 'MOBILE', 'ConfigError', 'GameConfig',
    'load_config', 'select_profile', 'DifficultyState', 'compute_difficulty',
    'FrameDriver', 'Obstacle', 'ObstacleStream', 'GameSession', 'GameState',
    'InvalidTransition', 'RoundState', 'SessionListener',
]
