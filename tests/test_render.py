import pygame
import pytest

from flappy.obstacles import Obstacle
from flappy.render import Renderer
from flappy.session import GameSession, MemoryScoreStore
from flappy.themes import BIRD_SKINS, THEMES, get_theme, hex_color


@pytest.fixture(scope='module', autouse=True)
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def surface(config):
    return pygame.Surface((config.screen_width, config.screen_height))


def test_hex_color():
    assert hex_color('#FFD700') == (255, 215, 0)
    assert hex_color('4ec0ca') == (78, 192, 202)


def test_unknown_theme_falls_back():
    assert get_theme('vaporwave') is THEMES['default']


@pytest.mark.parametrize('name', sorted(THEMES))
def test_every_theme_draws_a_round(name, config, surface, rng):
    session = GameSession(config, store=MemoryScoreStore(), rng=rng)
    session.start()
    for _ in range(3):
        session.tick()
    session.stream.obstacles.append(Obstacle(x=-20, gap_top=60, gap_height=200, width=config.pipe_width))

    theme = THEMES[name]
    theme.draw_background(surface, session.frame_count, config)
    for obstacle in session.obstacles:
        theme.draw_obstacle(surface, obstacle, config)
    for skin in BIRD_SKINS.values():
        theme.draw_bird(surface, session.bird, skin, session.frame_count)
    theme.draw_ground(surface, session.frame_count, config)

    # the floor is painted with the theme's ground colours
    assert surface.get_at((5, config.screen_height - 2))[:3] != (0, 0, 0)


def test_renderer_draws_every_state(config, surface, rng):
    session = GameSession(config, store=MemoryScoreStore(leaderboard=[4, 2]), rng=rng)
    renderer = Renderer(config)
    renderer.draw(surface, session)
    session.start()
    session.tick()
    renderer.draw(surface, session)
    session.bird.y = -100
    session.tick()
    renderer.draw(surface, session)


def test_renderer_selection(config):
    renderer = Renderer(config)
    renderer.set_theme('night')
    assert renderer.theme.name == 'night'
    renderer.set_skin('blue')
    assert renderer.skin is BIRD_SKINS['blue']
    renderer.set_skin('purple')
    assert renderer.skin_name == 'blue'
