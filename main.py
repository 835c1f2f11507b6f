import os
import random
import sys

import pygame
from pygame.locals import *

from flappy.audio import SoundBoard
from flappy.config import ConfigError, is_android, load_config
from flappy.driver import FrameDriver
from flappy.log import get_logger, setup_logging
from flappy.persistence import ScoreStore
from flappy.render import Renderer
from flappy.session import GameSession, GameState
from flappy.themes import BIRD_SKINS, THEMES

logger = get_logger('main')

IS_ANDROID = is_android()

# Base path for the score file - required for absolute paths on Android
BASE_PATH = os.path.dirname(os.path.abspath(__file__))


def get_path(relative_path):
    return os.path.join(BASE_PATH, relative_path)


def cycle(options, current):
    options = list(options)
    return options[(options.index(current) + 1) % len(options)]


def setup_display(config):
    """Returns (window, virtual render surface)."""
    if IS_ANDROID:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode(
            (config.screen_width, config.screen_height), pygame.SCALED, vsync=1)
    pygame.display.set_caption("Flappy Bird")
    return screen, pygame.Surface((config.screen_width, config.screen_height))


def present(screen, render_surface, config):
    screen.fill((0, 0, 0))
    if IS_ANDROID:
        # Scale to fit the screen while keeping the aspect ratio
        actual_w, actual_h = screen.get_size()
        ratio = min(actual_w / config.screen_width, actual_h / config.screen_height)
        new_size = (int(config.screen_width * ratio), int(config.screen_height * ratio))
        scaled_surf = pygame.transform.scale(render_surface, new_size)
        screen.blit(scaled_surf, ((actual_w - new_size[0]) // 2, (actual_h - new_size[1]) // 2))
    else:
        screen.blit(render_surface, (0, 0))
    pygame.display.flip()


def is_jump_event(e):
    if e.type == KEYDOWN and e.key in (K_SPACE, K_UP):
        return True
    # Accept both mouse and finger events for maximum compatibility
    if e.type == MOUSEBUTTONDOWN and e.button == 1:
        return True
    return e.type == pygame.FINGERDOWN


def main():
    setup_logging(os.environ.get('FLAPPY_LOG_LEVEL', 'info'), os.environ.get('FLAPPY_LOG_FILE'))
    try:
        config = load_config()
    except ConfigError as exc:
        logger.error('invalid configuration: %s', exc)
        return 2

    pygame.mixer.pre_init(48000, -16, 2, 4096)
    pygame.init()
    clock = pygame.time.Clock()
    screen, render_surface = setup_display(config)

    sounds = SoundBoard()
    session = GameSession(config, store=ScoreStore(get_path('scores.json')),
                          listeners=[sounds], rng=random.Random())
    driver = FrameDriver(session, clock)
    renderer = Renderer(config)
    theme_name, skin_name = 'default', 'yellow'
    logger.info('game ready', extra={'data': {'android': IS_ANDROID, 'audio': sounds.available}})

    run = True
    while run:
        driver.step()

        for e in pygame.event.get():
            if e.type == QUIT:
                run = False
                continue

            if is_jump_event(e):
                if session.state is GameState.IDLE:
                    session.start()
                    session.jump()
                elif session.state is GameState.RUNNING:
                    session.jump()
                continue

            if e.type != KEYDOWN:
                continue
            if e.key in (K_ESCAPE, K_AC_BACK):
                if session.state is GameState.GAME_OVER:
                    session.menu()
                elif session.state is GameState.IDLE:
                    run = False
            elif e.key in (K_RETURN, K_KP_ENTER) and session.state is GameState.GAME_OVER:
                session.restart()
            elif session.state is GameState.IDLE:
                if e.key == K_t:
                    theme_name = cycle(THEMES, theme_name)
                    renderer.set_theme(theme_name)
                elif e.key == K_b:
                    skin_name = cycle(BIRD_SKINS, skin_name)
                    renderer.set_skin(skin_name)
                elif e.key == K_m:
                    sounds.toggle_mute()

        renderer.draw(render_surface, session, muted=sounds.muted)
        present(screen, render_surface, config)

    session.dispose()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
