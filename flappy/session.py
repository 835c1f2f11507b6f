"""Round lifecycle: idle -> running -> game over, and back again."""

import enum
import random
from dataclasses import dataclass

from .bird import Bird
from .collision import check_collision
from .config import DESKTOP
from .difficulty import compute_difficulty
from .log import get_logger
from .obstacles import ObstacleStream

logger = get_logger('session')

LEADERBOARD_SIZE = 5


class GameState(enum.Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    GAME_OVER = 'game_over'


class InvalidTransition(RuntimeError):
    pass


@dataclass
class RoundState:
    score: int = 0
    running: bool = False
    frame_count: int = 0


class SessionListener:
    """Receives discrete game events. Return values are ignored."""

    def on_jump(self):
        pass

    def on_score(self, score):
        pass

    def on_game_over(self, score):
        pass


class MemoryScoreStore:
    """Score store that forgets everything when the process exits."""

    def __init__(self, best_score=0, leaderboard=()):
        self.best_score = best_score
        self.leaderboard = list(leaderboard)

    def load_best_score(self):
        return self.best_score

    def save_best_score(self, score):
        self.best_score = score

    def load_leaderboard(self):
        return list(self.leaderboard)

    def save_leaderboard(self, scores):
        self.leaderboard = list(scores)


def insert_score(scores, score, size=LEADERBOARD_SIZE):
    return sorted([*scores, score], reverse=True)[:size]


class GameSession:
    def __init__(self, config=DESKTOP, store=None, listeners=(), rng=None):
        self.config = config
        self.store = store if store is not None else MemoryScoreStore()
        self.listeners = list(listeners)
        self.rng = rng or random.Random()

        self.state = GameState.IDLE
        self.best_score = self.store.load_best_score()
        self.leaderboard = self.store.load_leaderboard()
        self.round = RoundState()
        self.difficulty = compute_difficulty(0, config)
        self.bird = None
        self.stream = ObstacleStream(config, self.rng)

    # --- Read-only views for renderers ---

    @property
    def score(self):
        return self.round.score

    @property
    def frame_count(self):
        return self.round.frame_count

    @property
    def running(self):
        return self.round.running

    @property
    def obstacles(self):
        return self.stream.obstacles

    def add_listener(self, listener):
        self.listeners.append(listener)

    def _emit(self, event, *args):
        for listener in self.listeners:
            getattr(listener, event)(*args)

    # --- Transitions ---

    def start(self):
        if self.state is GameState.RUNNING:
            raise InvalidTransition('round already running')
        self.round = RoundState(running=True)
        self.difficulty = compute_difficulty(0, self.config)
        self.bird = Bird.spawn(self.config)
        self.stream = ObstacleStream(self.config, self.rng)
        self.best_score = self.store.load_best_score()
        self.leaderboard = self.store.load_leaderboard()
        self.state = GameState.RUNNING
        logger.info('round started', extra={'data': {'best_score': self.best_score}})

    def restart(self):
        if self.state is not GameState.GAME_OVER:
            raise InvalidTransition(f'cannot restart from {self.state.value}')
        self.start()

    def menu(self):
        if self.state is not GameState.GAME_OVER:
            raise InvalidTransition(f'cannot open menu from {self.state.value}')
        self.state = GameState.IDLE

    def jump(self):
        if self.state is not GameState.RUNNING:
            return False
        self.bird.jump()
        self._emit('on_jump')
        return True

    def tick(self):
        """Advances the round by one frame and returns the resulting state."""
        if self.state is not GameState.RUNNING:
            return self.state

        self.bird.tick()

        self.stream.advance(self.difficulty.speed)
        self.stream.retire()
        self.stream.maybe_spawn(self.round.frame_count, self.difficulty)

        for _ in self.stream.check_score(self.bird.x):
            self.round.score += 1
            self.difficulty = compute_difficulty(self.round.score, self.config)
            logger.debug('scored', extra={'data': {'score': self.round.score,
                                                   'speed': self.difficulty.speed}})
            self._emit('on_score', self.round.score)

        if check_collision(self.bird, self.stream.obstacles,
                           self.config.screen_height, self.config.floor_height):
            self._game_over()
            return self.state

        self.round.frame_count += 1
        return self.state

    def _game_over(self):
        score = self.round.score
        self.round.running = False
        self.state = GameState.GAME_OVER

        if score > self.best_score:
            self.best_score = score
            self.store.save_best_score(score)
        self.leaderboard = insert_score(self.leaderboard, score)
        self.store.save_leaderboard(self.leaderboard)

        logger.info('game over', extra={'data': {
            'score': score, 'best_score': self.best_score, 'frames': self.round.frame_count}})
        self._emit('on_game_over', score)

    def dispose(self):
        self.bird = None
        self.stream.clear()
        self.listeners.clear()
        self.round = RoundState()
        self.state = GameState.IDLE
