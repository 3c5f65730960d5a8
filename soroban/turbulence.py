"""Turbulence: orbiting trails around a wandering centre, caged by a resizable circle."""

import math
import random
from collections import deque

import pygame

from soroban.audio import SoundId
from soroban.config import (
    ATTRACTION,
    BOUNDARY_DIAMETER,
    BOUNDARY_KEY_STEP,
    BOUNDARY_MARGIN,
    BOUNDARY_MAX_SHARE,
    BOUNDARY_MIN_SHARE,
    BOUNDARY_WHEEL_STEP,
    BREATHE_MS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    JUMPSCARE_MS,
    NOISE_STEP,
    NOISE_SWING,
    ORBIT_RADIUS,
    ORBIT_SPEED,
    ORBITER_COUNT,
    SPACE2_MS,
    STROKE_WIDTH,
    TRAIL_FADE_ALPHA,
    TRAIL_LENGTH,
    TURBULENCE_FPS,
    TURBULENCE_STARS,
    VOLUME_BLIP,
    VOLUME_BREATHE,
    VOLUME_JUMPSCARE,
    VOLUME_RESIZE,
    VOLUME_SLIDE,
    VOLUME_SPACE2,
    VOLUME_STORM,
    VOLUME_TONE,
)
from soroban.sketch import DEFAULT_ASSETS, Sketch, arm_timer
from soroban.starfield import Starfield

BREATHE_EVENT = pygame.USEREVENT + 3
JUMPSCARE_EVENT = pygame.USEREVENT + 4
SPACE2_EVENT = pygame.USEREVENT + 5

WHITE = (255, 255, 255)
GROW_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SHRINK_KEYS = (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS)


class Noise1D:
    """Smooth 1D gradient noise in [-0.5, 0.5], seeded from ``rng``."""

    def __init__(self, rng=None):
        perm = list(range(256))
        (rng or random).shuffle(perm)
        self.perm = perm + perm

    def __call__(self, x):
        xi = int(math.floor(x)) & 255
        xf = x - math.floor(x)
        u = xf * xf * xf * (xf * (xf * 6 - 15) + 10)
        g0 = xf if self.perm[xi] & 1 == 0 else -xf
        g1 = (xf - 1) if self.perm[xi + 1] & 1 == 0 else -(xf - 1)
        return g0 + u * (g1 - g0)


class Orbiter:
    """A point circling the moving centre, leaving a short trail behind."""

    def __init__(self, orbit_radius, speed, angle, trail_length):
        self.orbit_radius = orbit_radius
        self.speed = speed
        self.angle = angle
        self.trail = deque(maxlen=trail_length)

    @classmethod
    def random(cls, rng=None):
        rng = rng or random
        return cls(
            rng.uniform(*ORBIT_RADIUS),
            rng.uniform(*ORBIT_SPEED),
            rng.uniform(0, 2 * math.pi),
            rng.randint(*TRAIL_LENGTH),
        )

    def step(self, cx, cy):
        point = (cx + math.cos(self.angle) * self.orbit_radius,
                 cy + math.sin(self.angle) * self.orbit_radius)
        self.trail.append(point)
        self.angle += self.speed
        return point

    def draw(self, surface):
        if len(self.trail) > 1:
            pygame.draw.lines(surface, WHITE, False, list(self.trail), STROKE_WIDTH)


class OrbitField:
    """Boundary circle, the noisy wandering centre and the orbiters around it."""

    def __init__(self, width, height, rng=None):
        self.rng = rng or random
        self.diameter = BOUNDARY_DIAMETER
        self.noise = Noise1D(self.rng)
        self.noise_x = self.rng.uniform(0, 1000)
        self.noise_y = self.rng.uniform(0, 1000)
        self.vx = 0.0
        self.vy = 0.0
        self.orbiters = [Orbiter.random(self.rng) for _ in range(self.rng.randint(*ORBITER_COUNT))]
        self.resize(width, height)

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.cx = width / 2
        self.cy = height / 2
        self.x = self.cx
        self.y = self.cy

    @property
    def radius(self):
        return self.diameter / 2

    @property
    def max_offset(self):
        """How far the wandering centre may stray from the window centre."""
        return max(0.0, self.radius - BOUNDARY_MARGIN)

    def contains(self, x, y):
        return math.hypot(x - self.cx, y - self.cy) <= self.radius

    def change_diameter(self, delta):
        """Grow or shrink the boundary within the window limits; returns the applied change."""
        short_side = min(self.width, self.height)
        before = self.diameter
        self.diameter = max(short_side * BOUNDARY_MIN_SHARE,
                            min(short_side * BOUNDARY_MAX_SHARE, self.diameter + delta))
        return self.diameter - before

    def step(self, pointer=None):
        self.vx = self.noise(self.noise_x) * NOISE_SWING
        self.vy = self.noise(self.noise_y) * NOISE_SWING
        self.noise_x += NOISE_STEP
        self.noise_y += NOISE_STEP

        if pointer is not None and self.contains(*pointer):
            dx = pointer[0] - self.x
            dy = pointer[1] - self.y
            d = math.hypot(dx, dy)
            if d > 0.1:
                self.vx += dx / d * ATTRACTION
                self.vy += dy / d * ATTRACTION

        self.x += self.vx
        self.y += self.vy

        dx = self.x - self.cx
        dy = self.y - self.cy
        if math.hypot(dx, dy) > self.max_offset:
            angle = math.atan2(dy, dx)
            self.x = self.cx + math.cos(angle) * self.max_offset
            self.y = self.cy + math.sin(angle) * self.max_offset
            self.vx = -self.vx
            self.vy = -self.vy

        for orbiter in self.orbiters:
            orbiter.step(self.x, self.y)

    def draw(self, surface):
        center = (int(self.cx), int(self.cy))
        pygame.draw.circle(surface, WHITE, center, max(1, int(self.radius)), STROKE_WIDTH)
        for orbiter in self.orbiters:
            orbiter.draw(surface)


class Turbulence(Sketch):
    """Mouse wheel or +/- resizes the cage; crossing its edge, clicking and timers make sound."""

    title = "Turbulence"
    fps = TURBULENCE_FPS
    star_count = TURBULENCE_STARS
    sound_ids = (
        SoundId.STORM, SoundId.TONE, SoundId.SLIDE, SoundId.BLIP, SoundId.BREATHE,
        SoundId.JUMPSCARE, SoundId.INCREASE, SoundId.DECREASE, SoundId.SPACE_2,
    )

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, assets_dir=DEFAULT_ASSETS,
                 muted=False, rng=None):
        super().__init__(width, height, assets_dir, muted, rng)
        self.field = OrbitField(self.context.width, self.context.height, rng=self.rng)
        self.fade = None
        self.was_inside = False

        arm_timer(BREATHE_EVENT, BREATHE_MS, self.rng)
        arm_timer(JUMPSCARE_EVENT, JUMPSCARE_MS, self.rng)
        pygame.time.set_timer(SPACE2_EVENT, SPACE2_MS)
        self.resize(width, height)

    def build_starfield(self):
        return Starfield(self.context.width, self.context.height, self.star_count, self.rng,
                         exclude_radius=self.field.radius)

    def resize(self, width, height):
        self.context.resize(width, height)
        self.field.resize(self.context.width, self.context.height)
        super().resize(width, height)
        self.fade = pygame.Surface((self.context.width, self.context.height), pygame.SRCALPHA)
        self.fade.fill((0, 0, 0, TRAIL_FADE_ALPHA))

    def change_boundary(self, delta):
        change = self.field.change_diameter(delta)
        if not change:
            return 0
        self.starfield = self.build_starfield()
        self.board.play(SoundId.INCREASE if change > 0 else SoundId.DECREASE, VOLUME_RESIZE)
        return change

    # --------- Sound ---------
    def on_audio_start(self):
        self.board.loop(SoundId.STORM, VOLUME_STORM)

    def _pointer(self):
        x, y = self.context.mouse_x, self.context.mouse_y
        if 0 <= x <= self.context.width and 0 <= y <= self.context.height:
            return (x, y)
        return None

    # --------- Event handling ---------
    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key not in (pygame.K_m, pygame.K_ESCAPE, pygame.K_q):
            self.start_audio()
            self.board.play(SoundId.BLIP, VOLUME_BLIP)
        if super().handle_event(event):
            return True
        if event.type == BREATHE_EVENT:
            self.board.play(SoundId.BREATHE, VOLUME_BREATHE)
            arm_timer(BREATHE_EVENT, BREATHE_MS, self.rng)
        elif event.type == JUMPSCARE_EVENT:
            self.board.play(SoundId.JUMPSCARE, VOLUME_JUMPSCARE)
            arm_timer(JUMPSCARE_EVENT, JUMPSCARE_MS, self.rng)
        elif event.type == SPACE2_EVENT:
            if not (self.board.is_playing(SoundId.TONE) or self.board.is_playing(SoundId.JUMPSCARE)):
                self.board.play(SoundId.SPACE_2, VOLUME_SPACE2)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.field.contains(*event.pos):
                self.board.play(SoundId.TONE, VOLUME_TONE)
            else:
                self.board.play(SoundId.BLIP, VOLUME_BLIP)
        elif event.type == pygame.MOUSEWHEEL:
            self.change_boundary(event.y * BOUNDARY_WHEEL_STEP)
        elif event.type == pygame.KEYDOWN:
            if event.key in GROW_KEYS:
                self.change_boundary(BOUNDARY_KEY_STEP)
            elif event.key in SHRINK_KEYS:
                self.change_boundary(-BOUNDARY_KEY_STEP)
        return False

    def close(self):
        for event_type in (BREATHE_EVENT, JUMPSCARE_EVENT, SPACE2_EVENT):
            pygame.time.set_timer(event_type, 0)
        super().close()

    # --------- Frame ---------
    def update(self):
        super().update()
        pointer = self._pointer()
        self.field.step(pointer)
        if pointer is not None:
            inside = self.field.contains(*pointer)
            if inside != self.was_inside:
                self.board.play(SoundId.SLIDE, VOLUME_SLIDE)
            self.was_inside = inside

    def draw(self):
        # no clear: the translucent veil leaves fading trails
        self.screen.blit(self.fade, (0, 0))
        self.starfield.draw(self.screen, special_flags=pygame.BLEND_ADD)
        self.field.draw(self.screen)
        pygame.display.flip()
