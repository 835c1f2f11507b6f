"""Score-driven difficulty progression."""

from typing import NamedTuple


class DifficultyState(NamedTuple):
    speed: float
    spawn_interval: float
    gap_height: float

    @property
    def spawn_every(self):
        """Spawn period in whole ticks."""
        return int(self.spawn_interval)


def compute_difficulty(score, config):
    """Maps a score to (speed, spawn_interval, gap_height).

    Each value moves linearly with the score until it hits its bound, so a
    higher score is never easier than a lower one.
    """
    return DifficultyState(
        speed=min(config.base_speed + score * config.speed_step, config.max_speed),
        spawn_interval=max(config.base_spawn_interval - score * config.spawn_step,
                           config.min_spawn_interval),
        gap_height=max(config.base_gap - score * config.gap_step, config.min_gap),
    )
