import pygame

from .session import GameState
from .themes import BIRD_SKINS, BLACK, WHITE, get_theme

ORANGE, GREEN, BLUE, RED = (255, 140, 0), (0, 150, 0), (30, 80, 250), (255, 0, 0)


class Renderer:
    """Draws a GameSession; never mutates it."""

    def __init__(self, config, font=None, small_font=None):
        self.config = config
        self.font = font or pygame.font.SysFont('Arial', 48)
        self.small_font = small_font or pygame.font.SysFont('Arial', 24)
        self.theme = get_theme('default')
        self.skin_name = 'yellow'
        self._score_cache = {}

    @property
    def skin(self):
        return BIRD_SKINS[self.skin_name]

    def set_theme(self, name):
        self.theme = get_theme(name)

    def set_skin(self, name):
        if name in BIRD_SKINS:
            self.skin_name = name

    def render_text(self, text, color=WHITE, font=None):
        """Renders text with a simple drop shadow."""
        key = (text, color, id(font))
        if key in self._score_cache:
            return self._score_cache[key]
        font = font or self.font
        main_surf = font.render(str(text), True, color)
        shadow_surf = font.render(str(text), True, BLACK)
        w, h = main_surf.get_size()
        surf = pygame.Surface((w + 4, h + 4), pygame.SRCALPHA)
        surf.blit(shadow_surf, (2, 2))
        surf.blit(main_surf, (0, 0))
        if len(self._score_cache) > 256:
            self._score_cache.clear()
        self._score_cache[key] = surf
        return surf

    def blit_centered(self, surface, surf, y):
        surface.blit(surf, surf.get_rect(center=(self.config.screen_width // 2, y)))

    def draw(self, surface, session, muted=False):
        frame = session.frame_count
        self.theme.draw_background(surface, frame, self.config)
        for obstacle in session.obstacles:
            self.theme.draw_obstacle(surface, obstacle, self.config)
        if session.bird is not None:
            self.theme.draw_bird(surface, session.bird, self.skin, frame)
        self.theme.draw_ground(surface, frame, self.config)

        if session.state is GameState.RUNNING:
            color = RED if session.score > session.best_score else WHITE
            self.blit_centered(surface, self.render_text(session.score, color), 50)
        elif session.state is GameState.IDLE:
            self.draw_menu(surface, session, muted)
        else:
            self.draw_game_over(surface, session)

    def draw_menu(self, surface, session, muted):
        self.blit_centered(surface, self.render_text('PRESS SPACE TO FLAP', ORANGE, self.small_font), 150)
        lines = [
            f'Best: {session.best_score}',
            f'Theme: {self.theme.name}  [T]',
            f'Bird: {self.skin_name}  [B]',
            f'Sound: {"off" if muted else "on"}  [M]',
        ]
        for i, line in enumerate(lines):
            self.blit_centered(surface, self.render_text(line, WHITE, self.small_font), 220 + i * 36)
        self.draw_leaderboard(surface, session, 400)

    def draw_game_over(self, surface, session):
        new_record = session.score > 0 and session.score == session.best_score
        headline = f'NEW RECORD: {session.score}!' if new_record else f'SCORE: {session.score}'
        self.blit_centered(surface, self.render_text(headline, GREEN if new_record else WHITE), 120)
        self.blit_centered(surface, self.render_text(f'HIGH SCORE: {session.best_score}', BLUE, self.small_font), 180)
        self.blit_centered(surface, self.render_text('ENTER: restart   ESC: menu', ORANGE, self.small_font), 230)
        self.draw_leaderboard(surface, session, 300)

    def draw_leaderboard(self, surface, session, y):
        if not session.leaderboard:
            return
        self.blit_centered(surface, self.render_text('TOP SCORES', ORANGE, self.small_font), y)
        for i, score in enumerate(session.leaderboard):
            self.blit_centered(surface, self.render_text(f'{i + 1}. {score}', WHITE, self.small_font), y + 34 * (i + 1))
