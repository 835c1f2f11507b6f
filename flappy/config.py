"""Tunables for the simulation, grouped into device profiles."""

import math
import os
from dataclasses import dataclass, fields, replace as dc_replace

# Gap placement keeps this much clearance from the ceiling and the floor
GAP_MARGIN = 50

# Detect Android using environment variables
ANDROID_ENV_KEYS = ('ANDROID_ARGUMENT', 'ANDROID_PRIVATE')


class ConfigError(ValueError):
    """Raised when a set of tunables cannot produce a playable round."""


@dataclass(frozen=True)
class GameConfig:
    # --- World ---
    screen_width: int = 480
    screen_height: int = 720
    floor_height: int = 100
    fps: int = 60

    # --- Bird physics (pixels per tick) ---
    gravity: float = 0.2
    jump_impulse: float = -4.2
    terminal_velocity: float = 5.0
    bird_radius: float = 30

    # --- Pipes ---
    pipe_width: float = 60
    base_gap: float = 220
    min_gap: float = 160
    gap_step: float = 2

    # --- Difficulty progression ---
    base_speed: float = 1.5
    max_speed: float = 8
    speed_step: float = 0.2
    base_spawn_interval: float = 150
    min_spawn_interval: float = 50
    spawn_step: float = 3

    def __post_init__(self):
        self.validate()

    def validate(self):
        for f in fields(self):
            if not math.isfinite(getattr(self, f.name)):
                raise ConfigError(f'{f.name} must be a finite number, got {getattr(self, f.name)!r}')
        for name in ('screen_width', 'screen_height', 'fps', 'gravity',
                     'terminal_velocity', 'bird_radius', 'pipe_width',
                     'min_gap', 'base_speed'):
            if getattr(self, name) <= 0:
                raise ConfigError(f'{name} must be positive, got {getattr(self, name)!r}')
        for name in ('floor_height', 'gap_step', 'speed_step', 'spawn_step'):
            if getattr(self, name) < 0:
                raise ConfigError(f'{name} must not be negative, got {getattr(self, name)!r}')
        if self.jump_impulse >= 0:
            raise ConfigError(f'jump_impulse must be negative (upwards), got {self.jump_impulse!r}')
        if self.base_gap < self.min_gap:
            raise ConfigError(f'base_gap ({self.base_gap}) is smaller than min_gap ({self.min_gap})')
        if self.max_speed < self.base_speed:
            raise ConfigError(f'max_speed ({self.max_speed}) is below base_speed ({self.base_speed})')
        if self.min_spawn_interval < 1:
            raise ConfigError(f'min_spawn_interval must be at least 1 tick, got {self.min_spawn_interval!r}')
        if self.base_spawn_interval < self.min_spawn_interval:
            raise ConfigError(
                f'base_spawn_interval ({self.base_spawn_interval}) is below '
                f'min_spawn_interval ({self.min_spawn_interval})')
        if self.floor_height >= self.screen_height:
            raise ConfigError('floor_height leaves no playable band')
        if self.gap_band(self.base_gap) < 0:
            raise ConfigError(
                f'base_gap ({self.base_gap}) does not fit between ceiling and floor '
                f'with {GAP_MARGIN}px margins')

    @property
    def ground_level(self):
        return self.screen_height - self.floor_height

    def gap_band(self, gap_height):
        """Room left for random gap placement once margins are taken."""
        return self.ground_level - gap_height - 2 * GAP_MARGIN

    def replace(self, **overrides):
        return dc_replace(self, **overrides)


DESKTOP = GameConfig()

# Touch input is less precise: wider gaps and a gentler ramp
MOBILE = GameConfig(
    screen_width=720,
    screen_height=1280,
    floor_height=160,
    gravity=0.25,
    jump_impulse=-5.5,
    terminal_velocity=6.5,
    bird_radius=36,
    pipe_width=90,
    base_gap=300,
    min_gap=220,
    gap_step=2,
    base_speed=2.5,
    max_speed=9,
    speed_step=0.15,
    base_spawn_interval=160,
    min_spawn_interval=70,
    spawn_step=2,
)

PROFILES = {'desktop': DESKTOP, 'mobile': MOBILE}


def is_android(env=None):
    env = os.environ if env is None else env
    return any(key in env for key in ANDROID_ENV_KEYS)


def select_profile(name=None, env=None):
    """Returns the named profile, or the one matching the current device."""
    if name is None:
        name = 'mobile' if is_android(env) else 'desktop'
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise ConfigError(f'unknown profile {name!r}, expected one of {sorted(PROFILES)}') from None


def load_config(env=None):
    """Builds a config from FLAPPY_PROFILE plus FLAPPY_<FIELD> overrides."""
    env = os.environ if env is None else env
    base = select_profile(env.get('FLAPPY_PROFILE'), env)

    overrides = {}
    for f in fields(GameConfig):
        raw = env.get(f'FLAPPY_{f.name.upper()}')
        if raw is None:
            continue
        caster = int if f.type in (int, 'int') else float
        try:
            overrides[f.name] = caster(raw)
        except ValueError:
            raise ConfigError(f'FLAPPY_{f.name.upper()}={raw!r} is not a number') from None
    return base.replace(**overrides) if overrides else base
