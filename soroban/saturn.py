"""Disrupted Saturn: a planet whose ring system keeps fading out and respawning."""

import math
import random

import pygame

from soroban.ambience import AMBIENCE_END, AmbienceScheduler
from soroban.audio import ATMOSPHERE, RING_FADE_SFX, SoundId
from soroban.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    PLANET_SHARE,
    RING_CLICK_MAX,
    RING_CLICK_MIN,
    RING_COUNT_MAX,
    RING_COUNT_MIN,
    RING_FADE_FAST,
    RING_FADE_KNEE,
    RING_FADE_SLOW,
    RING_HIT_INNER,
    RING_HIT_OUTER,
    RING_SPAWN_FRAMES,
    RING_SPEED,
    RING_SPEED_FRAMES,
    RING_SPEED_START,
    SATURN_FPS,
    SATURN_STARS,
)
from soroban.sketch import DEFAULT_ASSETS, Sketch

TAU = 2 * math.pi
WHITE = (255, 255, 255)


class RingArc:
    """One elliptical arc of the ring system, fading from opaque to gone."""

    def __init__(self, cx, cy, width, height, span, rng=None):
        rng = rng or random
        self.cx = cx
        self.cy = cy
        self.w = width
        self.h = height
        self.span = span
        self.offset = rng.uniform(0, TAU)
        self.alpha = 255
        self.fade_speed = RING_FADE_SLOW

    def update(self):
        # lingers while bright, then drops out quickly
        self.fade_speed = RING_FADE_SLOW if self.alpha > RING_FADE_KNEE else RING_FADE_FAST
        self.alpha -= self.fade_speed

    def is_dead(self):
        return self.alpha <= 0

    def angles(self, ring_angle):
        """Start and end of the arc in screen angles (clockwise, y down)."""
        angle = ring_angle + self.offset
        return angle - self.span / 2, angle + self.span / 2

    def draw(self, surface, ring_angle):
        if self.is_dead():
            return
        start, end = self.angles(ring_angle)
        rect = pygame.Rect(0, 0, max(1, int(self.w)), max(1, int(self.h)))
        rect.center = (int(self.cx), int(self.cy))
        # pygame.draw.arc runs counter clockwise, so the screen angles are mirrored
        pygame.draw.arc(surface, WHITE + (int(self.alpha),), rect, -end, -start, 1)


def spawn_rings(cx, cy, planet_radius, count, rng=None):
    """A batch of concentric arcs sharing one random span, widening outward."""
    rng = rng or random
    count = max(RING_COUNT_MIN, min(RING_COUNT_MAX, count))
    base_w = planet_radius * 2.0
    base_h = planet_radius * 0.27
    step_w = planet_radius * 0.13
    step_h = planet_radius * 0.027
    span = rng.uniform(0, math.pi / 3)
    return [
        RingArc(cx, cy, base_w + i * step_w, base_h + i * step_h, span, rng=rng)
        for i in range(count)
    ]


class RingSystem:
    """Planet geometry plus the live arcs; spawns a batch every few frames."""

    def __init__(self, width, height, rng=None):
        self.rng = rng or random
        self.rings = []
        self.angle = 0.0
        self.frame = 0
        self.last_spawn = RING_SPAWN_FRAMES
        self.requested = 0
        self.resize(width, height)

    def resize(self, width, height):
        self.cx = width / 2
        self.cy = height / 2
        self.planet_radius = min(width, height) * PLANET_SHARE
        self.rings = []
        self.spawn()

    def spawn(self):
        self.rings.extend(spawn_rings(self.cx, self.cy, self.planet_radius, self.requested, self.rng))

    @property
    def speed(self):
        return RING_SPEED if self.frame > RING_SPEED_FRAMES else RING_SPEED_START

    def update(self):
        self.frame += 1
        if self.frame - self.last_spawn >= RING_SPAWN_FRAMES:
            self.spawn()
            self.last_spawn = self.frame
        for ring in self.rings:
            ring.update()
        self.rings = [ring for ring in self.rings if not ring.is_dead()]
        self.angle += self.speed

    def in_ring_zone(self, x, y):
        d = math.hypot(x - self.cx, y - self.cy)
        return self.planet_radius * RING_HIT_INNER < d < self.planet_radius * RING_HIT_OUTER

    def scatter(self):
        """Pick a new ring count for the batches that follow."""
        self.requested = self.rng.randint(RING_CLICK_MIN, RING_CLICK_MAX)
        return self.requested

    def draw(self, surface):
        center = (int(self.cx), int(self.cy))
        radius = max(1, int(self.planet_radius))
        pygame.draw.circle(surface, (0, 0, 0, 255), center, radius)
        pygame.draw.circle(surface, WHITE + (255,), center, radius, 1)

        for ring in self.rings:
            ring.draw(surface, self.angle)

        # the upper half of the planet sits in front of the rings
        front = [
            (self.cx + math.cos(a) * self.planet_radius, self.cy - math.sin(a) * self.planet_radius)
            for a in (math.pi * i / 48 for i in range(49))
        ]
        pygame.draw.polygon(surface, (0, 0, 0, 255), front)
        pygame.draw.lines(surface, WHITE + (255,), True, front, 1)


class DisruptedSaturn(Sketch):
    """Saturn over a starfield; clicking the rings changes how many respawn."""

    title = "Disrupted Saturn"
    fps = SATURN_FPS
    star_count = SATURN_STARS
    sound_ids = (SoundId.PLANET_AMBIENCE, SoundId.RINGS_AMBIENCE) + tuple(
        sid for sid, _ in ATMOSPHERE) + RING_FADE_SFX
    gesture_starts_audio = False

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, assets_dir=DEFAULT_ASSETS,
                 muted=False, rng=None):
        super().__init__(width, height, assets_dir, muted, rng)
        self.system = RingSystem(self.context.width, self.context.height, rng=self.rng)
        self.atmosphere = AmbienceScheduler(self.board, ATMOSPHERE, rng=self.rng)
        self.resize(width, height)

    def resize(self, width, height):
        super().resize(width, height)
        self.system.resize(self.context.width, self.context.height)

    # --------- Sound ---------
    def on_audio_start(self):
        self.board.loop(SoundId.PLANET_AMBIENCE)
        self.board.loop(SoundId.RINGS_AMBIENCE)
        self.atmosphere.start()

    def on_audio_stop(self):
        self.atmosphere.stop()
        self.board.stop_all()

    # --------- Event handling ---------
    def press(self, x, y):
        if not self.system.in_ring_zone(x, y):
            return False
        self.system.scatter()
        self.board.play_random(RING_FADE_SFX, 1.0, self.rng)
        return True

    def handle_event(self, event):
        if super().handle_event(event):
            return True
        if event.type == AMBIENCE_END:
            self.atmosphere.handle_end()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press(*event.pos)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_s:
            self.toggle_sound()
        return False

    # --------- Frame ---------
    def update(self):
        super().update()
        self.system.update()

    def draw(self):
        self.draw_background()
        layer = pygame.Surface((self.context.width, self.context.height), pygame.SRCALPHA)
        self.system.draw(layer)
        self.screen.blit(layer, (0, 0))
        pygame.display.flip()
