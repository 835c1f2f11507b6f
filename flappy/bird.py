from dataclasses import dataclass


@dataclass
class Bird:
    x: float
    y: float
    radius: float
    gravity: float
    jump_impulse: float
    terminal_velocity: float
    velocity: float = 0.0

    @classmethod
    def spawn(cls, config):
        """Places a resting bird at a quarter of the width, mid-height."""
        return cls(
            x=config.screen_width / 4,
            y=config.screen_height / 2,
            radius=config.bird_radius,
            gravity=config.gravity,
            jump_impulse=config.jump_impulse,
            terminal_velocity=config.terminal_velocity,
        )

    def tick(self):
        # Only the fall is capped, a jump keeps its full upward speed
        self.velocity = min(self.velocity + self.gravity, self.terminal_velocity)
        self.y += self.velocity

    def jump(self):
        self.velocity = self.jump_impulse

    @property
    def top(self):
        return self.y - self.radius

    @property
    def bottom(self):
        return self.y + self.radius

    @property
    def left(self):
        return self.x - self.radius

    @property
    def right(self):
        return self.x + self.radius
