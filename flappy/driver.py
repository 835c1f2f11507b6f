from .session import GameState


class FrameDriver:
    """Runs one simulation tick per display frame.

    `clock` is anything with a pygame-style ``tick(fps)``; without one the
    driver steps as fast as it is called, which is what tests want.
    """

    def __init__(self, session, clock=None, fps=None):
        self.session = session
        self.clock = clock
        self.fps = fps or session.config.fps
        self.frames = 0
        self._stepping = False

    def step(self):
        if self._stepping:
            raise RuntimeError('FrameDriver.step() is not reentrant')
        self._stepping = True
        try:
            if self.clock is not None:
                self.clock.tick(self.fps)
            self.frames += 1
            return self.session.tick()
        finally:
            self._stepping = False

    def run_until_over(self, max_frames):
        """Steps until the round ends or max_frames have elapsed."""
        for _ in range(max_frames):
            if self.step() is not GameState.RUNNING:
                break
        return self.session.state
