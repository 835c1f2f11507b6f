"""Synthesised sound effects played in response to session events."""

import math
from array import array

import pygame

from .log import get_logger
from .session import SessionListener

logger = get_logger('audio')

# (frequency Hz, start offset s, duration s, peak gain)
JUMP_NOTES = [(523, 0.0, 0.15, 0.10), (659, 0.0, 0.15, 0.10)]
SCORE_NOTES = [(523, 0.0, 0.3, 0.08), (659, 0.05, 0.3, 0.08), (784, 0.1, 0.3, 0.08)]
GAME_OVER_NOTES = [(392, 0.0, 0.4, 0.10), (349, 0.1, 0.4, 0.10),
                   (330, 0.2, 0.4, 0.10), (294, 0.3, 0.4, 0.10)]


def synth_samples(notes, rate, wave='sine'):
    """Mixes decaying notes into one mono int16 buffer."""
    length = max(int((start + dur) * rate) for _, start, dur, _ in notes)
    mix = [0.0] * length
    for freq, start, dur, gain in notes:
        first = int(start * rate)
        n = int(dur * rate)
        for i in range(n):
            t = i / rate
            phase = 2 * math.pi * freq * t
            if wave == 'triangle':
                v = 2 / math.pi * math.asin(math.sin(phase))
            else:
                v = math.sin(phase)
            # Exponential ramp from gain down to 0.01 over the note
            env = gain * (0.01 / gain) ** (i / n)
            mix[first + i] += v * env
    return array('h', (max(-32767, min(32767, int(s * 32767))) for s in mix))


class SoundBoard(SessionListener):
    def __init__(self, muted=False):
        self.muted = muted
        self.sounds = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            rate, _, channels = pygame.mixer.get_init()
        except pygame.error as exc:
            logger.warning('audio unavailable, running silent', extra={'data': {'error': str(exc)}})
            return
        for name, notes, wave in (('jump', JUMP_NOTES, 'sine'),
                                  ('score', SCORE_NOTES, 'sine'),
                                  ('game_over', GAME_OVER_NOTES, 'triangle')):
            mono = synth_samples(notes, rate, wave)
            if channels > 1:
                frames = array('h')
                for s in mono:
                    frames.extend([s] * channels)
                mono = frames
            try:
                self.sounds[name] = pygame.mixer.Sound(buffer=mono)
            except pygame.error as exc:
                logger.warning('could not build sound', extra={'data': {'sound': name, 'error': str(exc)}})

    @property
    def available(self):
        return bool(self.sounds)

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        sound = self.sounds.get(name)
        if self.muted or sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.warning('playback failed', extra={'data': {'sound': name, 'error': str(exc)}})

    def on_jump(self):
        self.play('jump')

    def on_score(self, score):
        self.play('score')

    def on_game_over(self, score):
        self.play('game_over')
