"""Visual styles. Each theme draws the same simulation data its own way."""

import math
from dataclasses import dataclass

import pygame

WHITE, BLACK = (255,) * 3, (0,) * 3


def hex_color(value):
    value = value.lstrip('#')
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


def lerp_color(a, b, t):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def vertical_gradient(surface, stops, height):
    """Fills rows 0..height with colors interpolated between stops."""
    width = surface.get_width()
    if len(stops) == 1:
        stops = stops * 2
    segments = len(stops) - 1
    for y in range(height):
        t = y / max(1, height - 1) * segments
        i = min(int(t), segments - 1)
        pygame.draw.line(surface, lerp_color(stops[i], stops[i + 1], t - i), (0, y), (width, y))


@dataclass(frozen=True)
class BirdSkin:
    body: tuple
    wing: tuple
    belly: tuple


BIRD_SKINS = {
    'yellow': BirdSkin(hex_color('#FFD700'), hex_color('#FFA500'), hex_color('#FFED4E')),
    'red': BirdSkin(hex_color('#FF6B6B'), hex_color('#FF4757'), hex_color('#FF8E8E')),
    'blue': BirdSkin(hex_color('#4ECDC4'), hex_color('#45B7D1'), hex_color('#7EDCE2')),
}


class Theme:
    name = 'default'
    sky = ('#4ec0ca', '#87CEEB')
    ground = '#ded895'
    ground_accent = '#c9c05a'
    pipe = '#5cb85c'
    pipe_highlight = '#6ecf6e'
    pipe_shadow = '#4a9d4a'
    pipe_outline = '#4CAF50'

    CAP_HEIGHT, CAP_OVERHANG = 25, 5

    def draw_background(self, surface, frame_count, config):
        vertical_gradient(surface, [hex_color(c) for c in self.sky], config.ground_level)
        self.draw_scenery(surface, frame_count, config)

    def draw_scenery(self, surface, frame_count, config):
        for base, speed, y in ((100, 0.3, 100), (300, 0.2, 150), (200, 0.25, 200)):
            x = (base + frame_count * speed) % (config.screen_width + 100) - 50
            self.draw_cloud(surface, x, y)

    def draw_cloud(self, surface, x, y):
        for dx, dy, r in ((0, 0, 20), (25, -5, 25), (50, 0, 20)):
            pygame.draw.circle(surface, WHITE, (int(x + dx), int(y + dy)), r)

    def draw_ground(self, surface, frame_count, config):
        top = config.ground_level
        width = config.screen_width
        ground, accent = hex_color(self.ground), hex_color(self.ground_accent)
        for y in range(top, config.screen_height):
            t = (y - top) / max(1, config.floor_height - 1)
            pygame.draw.line(surface, lerp_color(ground, accent, t), (0, y), (width, y))
        offset = (frame_count * 2) % 40
        for x in range(-offset, width, 20):
            pygame.draw.line(surface, accent, (x, top + 5), (x, top + 15), 2)
        pygame.draw.line(surface, accent, (0, top), (width, top), 3)

    def draw_obstacle(self, surface, obstacle, config):
        x, w = int(obstacle.x), int(obstacle.width)
        top_h = int(obstacle.gap_top)
        bottom_y = int(obstacle.gap_bottom)
        self.draw_pipe(surface, x, 0, w, top_h, cap_at_bottom=True)
        self.draw_pipe(surface, x, bottom_y, w, config.ground_level - bottom_y, cap_at_bottom=False)

    def draw_pipe(self, surface, x, y, w, h, cap_at_bottom):
        if h <= 0:
            return
        body = pygame.Rect(x, y, w, h)
        pygame.draw.rect(surface, hex_color(self.pipe), body)
        pygame.draw.rect(surface, hex_color(self.pipe_shadow), (x, y, max(1, w // 6), h))
        pygame.draw.rect(surface, hex_color(self.pipe_highlight), (x + w // 2, y, max(1, w // 8), h))
        pygame.draw.rect(surface, hex_color(self.pipe_outline), body, 2)

        cap_y = y + h - self.CAP_HEIGHT if cap_at_bottom else y
        cap = pygame.Rect(x - self.CAP_OVERHANG, cap_y, w + 2 * self.CAP_OVERHANG, self.CAP_HEIGHT)
        pygame.draw.rect(surface, hex_color(self.pipe_highlight), cap)
        pygame.draw.rect(surface, hex_color(self.pipe_outline), cap, 2)

    def draw_bird(self, surface, bird, skin, frame_count):
        size = int(bird.radius)
        side = size * 2 + 24
        c = side // 2
        sprite = pygame.Surface((side, side), pygame.SRCALPHA)

        flap = int(math.sin(frame_count * 0.2) * 5)
        pygame.draw.ellipse(sprite, skin.wing, (c - 20, c - 5 + flap, 30, 20))
        pygame.draw.circle(sprite, skin.body, (c, c), size)
        pygame.draw.circle(sprite, skin.belly, (c + 3, c + 8), int(size * 0.6))
        pygame.draw.circle(sprite, WHITE, (c + 10, c - 5), 8)
        pygame.draw.circle(sprite, BLACK, (c + 12, c - 5), 4)
        pygame.draw.circle(sprite, WHITE, (c + 13, c - 6), 2)
        pygame.draw.polygon(sprite, hex_color('#FF8C00'), [(c + 20, c), (c + 30, c), (c + 25, c + 5)])

        # Nose up while climbing, down while falling
        angle = -max(-0.5, min(0.5, bird.velocity * 0.05)) * 180 / math.pi
        rotated = pygame.transform.rotate(sprite, angle)
        surface.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))


class NightTheme(Theme):
    name = 'night'
    sky = ('#0a1128', '#1a1f3a', '#2e3856')
    ground = '#1a1a2e'
    ground_accent = '#16213e'
    pipe = '#16213E'
    pipe_highlight = '#1e2d5f'
    pipe_shadow = '#0f1729'
    pipe_outline = '#0F3460'

    def draw_scenery(self, surface, frame_count, config):
        pygame.draw.circle(surface, hex_color('#F4F1C9'), (config.screen_width - 80, 80), 30)
        band = max(1, config.ground_level - 50)
        for i in range(60):
            x = (i * 37) % config.screen_width
            y = (i * 53) % band
            twinkle = abs(math.sin(frame_count * 0.05 + i))
            shade = int(100 + 155 * twinkle)
            pygame.draw.circle(surface, (shade, shade, shade), (x, y), int(twinkle * 2 + 1))

    def draw_pipe(self, surface, x, y, w, h, cap_at_bottom):
        if h > 0:
            glow = pygame.Rect(x - 3, y, w + 6, h)
            pygame.draw.rect(surface, hex_color('#4a9eff'), glow, 1)
        super().draw_pipe(surface, x, y, w, h, cap_at_bottom)


class SunsetTheme(Theme):
    name = 'sunset'
    sky = ('#FF6B9D', '#FFA07A', '#FFD700', '#87CEEB')
    ground = '#E67E22'
    ground_accent = '#D35400'
    pipe = '#E74C3C'
    pipe_highlight = '#ff6b6b'
    pipe_shadow = '#c0392b'
    pipe_outline = '#C0392B'

    def draw_scenery(self, surface, frame_count, config):
        pygame.draw.circle(surface, hex_color('#FF8C00'), (config.screen_width // 2, 120), 50)
        for base_x, y, amp, rate in ((150, 100, 20, 0.02), (200, 120, 15, 0.015)):
            x = base_x + math.sin(frame_count * rate) * amp
            pygame.draw.lines(surface, BLACK, False, [(x - 8, y - 4), (x, y), (x + 8, y - 4)], 2)


class ClassicTheme(Theme):
    """Flat colours and blocky shapes, like the original arcade look."""

    name = 'classic'
    sky = ('#4EC0CA', '#4EAFCA')
    pipe = '#73BF2E'
    pipe_highlight = '#9CE659'
    pipe_shadow = '#558022'
    pipe_outline = '#000000'

    CAP_HEIGHT, CAP_OVERHANG = 26, 6

    def draw_scenery(self, surface, frame_count, config):
        span = config.screen_width + 100
        for shift, y in ((0, 60), (250, 110), (500, 160)):
            x = -100 + (frame_count * 0.3 + shift) % span
            for dx, dy, w, h in ((0, 8, 48, 16), (8, 0, 32, 8), (16, -8, 16, 8)):
                pygame.draw.rect(surface, WHITE, (int(x + dx), y + dy, w, h))

    def draw_bird(self, surface, bird, skin, frame_count):
        s = 1.3
        wing = (frame_count // 8) % 3
        sprite = pygame.Surface((int(40 * s), int(30 * s)), pygame.SRCALPHA)
        ox, oy = int(15 * s), int(12 * s)

        def block(color, x, y, w, h):
            pygame.draw.rect(sprite, color, (ox + int(x * s), oy + int(y * s), max(1, int(w * s)), max(1, int(h * s))))

        block(skin.body, -12, -9, 24, 18)
        block(skin.belly, -8, -3, 16, 12)
        block(skin.wing, -10, (-6, 0, 4)[wing], 10, 8)
        block(WHITE, 6, -9, 8, 8)
        block(BLACK, 9, -7, 5, 6)
        block(hex_color('#FF8800'), 12, -5, 8, 3)
        block(hex_color('#FF8800'), 12, -2, 6, 3)

        angle = -max(-0.5, min(0.5, bird.velocity * 0.08)) * 180 / math.pi
        rotated = pygame.transform.rotate(sprite, angle)
        surface.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))


THEMES = {t.name: t for t in (Theme(), NightTheme(), SunsetTheme(), ClassicTheme())}


def get_theme(name):
    return THEMES.get(name, THEMES['default'])
