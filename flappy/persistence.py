"""High score and leaderboard storage in a small JSON file."""

import json
import math
import os

from .log import get_logger
from .session import LEADERBOARD_SIZE

logger = get_logger('persistence')

BASE_PATH = os.path.dirname(os.path.abspath(__file__))


def get_path(relative_path):
    return os.path.join(BASE_PATH, relative_path)


def is_score(value):
    # json accepts NaN and Infinity, which int() cannot take
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ScoreStore:
    """Every failure is logged and swallowed; the game keeps running."""

    def __init__(self, path=None):
        self.path = path or get_path('scores.json')

    def _read(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning('could not read scores', extra={'data': {'path': str(self.path), 'error': str(exc)}})
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, **changes):
        data = self._read()
        data.update(changes)
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f)
        except OSError as exc:
            logger.warning('could not save scores', extra={'data': {'path': str(self.path), 'error': str(exc)}})

    def load_best_score(self):
        value = self._read().get('best_score', 0)
        if not is_score(value):
            return 0
        return max(0, int(value))

    def save_best_score(self, score):
        self._write(best_score=int(score))

    def load_leaderboard(self):
        raw = self._read().get('leaderboard', [])
        if not isinstance(raw, list):
            return []
        scores = [int(s) for s in raw if is_score(s)]
        return sorted(scores, reverse=True)[:LEADERBOARD_SIZE]

    def save_leaderboard(self, scores):
        scores = sorted((int(s) for s in scores), reverse=True)[:LEADERBOARD_SIZE]
        self._write(leaderboard=scores)
