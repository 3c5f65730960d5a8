import random

import pygame

from soroban.config import MOVE_LERP, MOVE_THRESHOLD


class Planet:
    """A bead drawn as a ringed planet; eases vertically toward its target."""

    def __init__(self, x, y, radius, rng=None):
        rng = rng or random
        self.x = x
        self.y = y
        self.target_y = y
        self.r = radius
        if rng.random() < 0.75:
            self.ring_count = rng.randint(1, 5)
        else:
            self.ring_count = rng.randint(8, 14)

    def set_target(self, y):
        self.target_y = y

    def update(self, lerp=MOVE_LERP, threshold=MOVE_THRESHOLD):
        self.y += (self.target_y - self.y) * lerp
        if abs(self.y - self.target_y) < threshold:
            self.y = self.target_y

    def snap(self):
        self.y = self.target_y

    @property
    def settled(self):
        return self.y == self.target_y

    def ring_alpha(self, i):
        if self.ring_count <= 1:
            return 180
        t = i / float(self.ring_count - 1)
        return int(180 + (40 - 180) * t)

    def draw(self, surface, layout):
        sx, sy = layout.to_screen(self.x, self.y)
        center = (int(round(sx)), int(round(sy)))
        radius_px = max(1, int(round(self.r * layout.scale)))

        pygame.draw.circle(surface, (0, 0, 0, 255), center, radius_px)
        pygame.draw.circle(surface, (255, 255, 255, 255), center, radius_px, 2)

        for i in range(self.ring_count):
            size = self.r * 2 - (i + 1) * (self.r * 0.15)
            if size <= 8:
                continue
            ring_px = max(1, int(round(size * 0.5 * layout.scale)))
            pygame.draw.circle(surface, (255, 255, 255, self.ring_alpha(i)), center, ring_px, 1)
