import math
import random
from collections import namedtuple

import pygame

from soroban.config import BG, NUM_STARS

Star = namedtuple("Star", "x y brightness size")


def _map(value, start1, stop1, start2, stop2):
    if stop1 == start1:
        return start2
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def generate_stars(width, height, count=NUM_STARS, rng=None, exclude_radius=0):
    """Random stars, brighter and larger towards the centre of the window.

    Stars falling within ``exclude_radius`` of the centre are redrawn, so the
    field keeps ``count`` stars outside that circle.
    """
    rng = rng or random
    cx = width / 2
    cy = height / 2
    max_dist = math.hypot(cx, cy)
    if exclude_radius >= max_dist:
        return []
    stars = []
    while len(stars) < count:
        x = rng.uniform(0, width)
        y = rng.uniform(0, height)
        d = math.hypot(x - cx, y - cy)
        if d <= exclude_radius:
            continue
        brightness = _map(d, 0, max_dist, 255, 80) * rng.uniform(0.6, 1.1)
        size = _map(d, 0, max_dist, 2.2, 0.5) * rng.uniform(0.6, 1.3)
        stars.append(Star(x, y, min(255.0, brightness), size))
    return stars


class Starfield:
    """Stars rendered once onto a background surface; rebuilt when the window resizes."""

    def __init__(self, width, height, count=NUM_STARS, rng=None, exclude_radius=0):
        self.count = count
        self.rng = rng
        self.exclude_radius = exclude_radius
        self.stars = []
        self.surface = None
        self.resize(width, height)

    def resize(self, width, height):
        width = max(1, int(width))
        height = max(1, int(height))
        self.stars = generate_stars(width, height, self.count, self.rng, self.exclude_radius)
        self.surface = pygame.Surface((width, height))
        self.surface.fill(BG)
        for star in self.stars:
            b = int(star.brightness)
            radius = star.size * 0.5
            pos = (int(star.x), int(star.y))
            if radius < 1.0:
                self.surface.set_at(pos, (b, b, b))
            else:
                pygame.draw.circle(self.surface, (b, b, b), pos, int(round(radius)))

    def draw(self, target, special_flags=0):
        target.blit(self.surface, (0, 0), special_flags=special_flags)
