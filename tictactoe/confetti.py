import math
import random
from dataclasses import dataclass

from .config import (
    CONFETTI_COLORS, CONFETTI_COUNT, CONFETTI_GRAVITY, CONFETTI_LIFETIME_S,
)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    angle: float           # degrees
    spin: float            # degrees / s
    color: str
    width: float = 8.0
    height: float = 4.0


class ConfettiBurst:
    """
    one cannon shot: particles fly out of origin, fall, and fade
    """
    def __init__(self, origin, count=CONFETTI_COUNT,
                 lifetime=CONFETTI_LIFETIME_S, gravity=CONFETTI_GRAVITY,
                 colors=CONFETTI_COLORS, rng=None):
        self.origin = origin
        self.lifetime = lifetime
        self.gravity = gravity
        self.elapsed = 0.0
        rng = rng or random.Random()
        self.particles = [self._spawn(rng, colors) for _ in range(count)]

    def _spawn(self, rng, colors):
        # fan downward, mostly sideways spread
        heading = math.radians(rng.uniform(20, 160))
        speed = rng.uniform(150, 550)
        ox, oy = self.origin
        return Particle(
            x=ox, y=oy,
            vx=math.cos(heading) * speed,
            vy=math.sin(heading) * speed - rng.uniform(100, 300),
            angle=rng.uniform(0, 360),
            spin=rng.uniform(-540, 540),
            color=rng.choice(colors),
            width=rng.uniform(6, 10),
            height=rng.uniform(3, 6),
        )

    @property
    def finished(self):
        return self.elapsed >= self.lifetime

    @property
    def opacity(self):
        """
        full for the first half of the lifetime, then linear fade
        """
        half = self.lifetime / 2
        if self.elapsed <= half:
            return 1.0
        return max(0.0, 1.0 - (self.elapsed - half) / half)

    def step(self, dt):
        """
        advance by dt seconds; returns False once the burst is spent
        """
        if self.finished:
            return False
        self.elapsed = min(self.lifetime, self.elapsed + dt)
        drag = 0.99 ** (dt * 60)
        for p in self.particles:
            p.vy += self.gravity * dt
            p.vx *= drag
            p.x += p.vx * dt
            p.y += p.vy * dt
            p.angle = (p.angle + p.spin * dt) % 360
        return not self.finished
