import random
from dataclasses import dataclass

from .config import GAP_MARGIN


@dataclass
class Obstacle:
    x: float
    gap_top: float
    gap_height: float
    width: float
    scored: bool = False

    @property
    def right(self):
        return self.x + self.width

    @property
    def gap_bottom(self):
        return self.gap_top + self.gap_height

    def is_off_screen(self):
        return self.right < 0


class ObstacleStream:
    """Pipe pairs in spawn order, which is also left-to-right order."""

    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng or random.Random()
        self.obstacles = []
        self._last_spawn_frame = None

    def __iter__(self):
        return iter(self.obstacles)

    def __len__(self):
        return len(self.obstacles)

    def should_spawn(self, frame_count, difficulty):
        return frame_count % difficulty.spawn_every == 0 and frame_count != self._last_spawn_frame

    def spawn(self, difficulty, frame_count=None):
        gap = difficulty.gap_height
        # Uniform over the whole valid band, independent of the previous pipe
        gap_top = self.rng.uniform(GAP_MARGIN, GAP_MARGIN + self.config.gap_band(gap))
        obstacle = Obstacle(
            x=self.config.screen_width,
            gap_top=gap_top,
            gap_height=gap,
            width=self.config.pipe_width,
        )
        self.obstacles.append(obstacle)
        self._last_spawn_frame = frame_count
        return obstacle

    def maybe_spawn(self, frame_count, difficulty):
        if self.should_spawn(frame_count, difficulty):
            return self.spawn(difficulty, frame_count)
        return None

    def advance(self, speed):
        for obstacle in self.obstacles:
            obstacle.x -= speed

    def retire(self):
        self.obstacles = [o for o in self.obstacles if not o.is_off_screen()]

    def check_score(self, bird_x):
        """Marks pipes whose trailing edge has passed bird_x; returns them."""
        passed = []
        for obstacle in self.obstacles:
            if not obstacle.scored and obstacle.right < bird_x:
                obstacle.scored = True
                passed.append(obstacle)
        return passed

    def clear(self):
        self.obstacles = []
        self._last_spawn_frame = None
