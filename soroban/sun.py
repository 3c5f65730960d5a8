"""The Sun: a dark disc radiating fading light rays, with expanding pulses."""

import math
import random

import pygame

from soroban.ambience import AMBIENCE_END, AmbienceScheduler
from soroban.audio import SUN_PLAYLIST, SoundId
from soroban.config import (
    AUTO_PULSE_ALPHA,
    AUTO_PULSE_MS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    PULSE_BURST_MAX,
    PULSE_BURST_MIN,
    PULSE_REACH,
    PULSE_SPEED_MAX,
    PULSE_SPEED_MIN,
    RAY_ALPHA_INNER,
    RAY_ALPHA_OUTER,
    RAY_COUNT_MAX,
    RAY_COUNT_MIN,
    RAY_INNER,
    RAY_LENGTH,
    RAY_SEGMENTS,
    RAY_SPIN_MAX,
    RAY_SPIN_MIN,
    SUN_DIAMETER,
    SUN_FPS,
    SUN_STARS,
)
from soroban.sketch import DEFAULT_ASSETS, Sketch, arm_timer

AUTO_PULSE = pygame.USEREVENT + 2

TAU = 2 * math.pi


def ray_segments(count, rotation, cx, cy, inner=RAY_INNER, length=RAY_LENGTH, segments=RAY_SEGMENTS):
    """Yield (alpha, start, end) for the short pieces each ray is drawn with.

    Rays are evenly spaced, each centred in its angular slot, and fade from
    RAY_ALPHA_INNER at the sun's edge to RAY_ALPHA_OUTER at the tip.
    """
    step = TAU / count
    for i in range(count):
        mid = i * step + step / 2 + rotation
        c, s = math.cos(mid), math.sin(mid)
        for k in range(segments):
            t1 = k / segments
            t2 = (k + 1) / segments
            r1 = inner + length * t1
            r2 = inner + length * t2
            alpha = RAY_ALPHA_INNER + (RAY_ALPHA_OUTER - RAY_ALPHA_INNER) * t1
            yield int(alpha), (cx + r1 * c, cy + r1 * s), (cx + r2 * c, cy + r2 * s)


class PulseCircle:
    """A ring growing from the sun's centre until it is well off screen."""

    def __init__(self, alpha=255, rng=None):
        rng = rng or random
        self.r = 0.0
        self.speed = rng.uniform(PULSE_SPEED_MIN, PULSE_SPEED_MAX)
        self.active = True
        self.alpha = alpha

    def update(self, width, height):
        if not self.active:
            return
        self.r += self.speed
        if self.r > max(width, height) * PULSE_REACH:
            self.active = False

    def draw(self, surface, center):
        if not self.active or self.r < 2:
            return
        pygame.draw.circle(surface, (255, 255, 255, self.alpha), center, int(self.r), 2)


class Corona:
    """Ray fan and pulse rings around the sun."""

    def __init__(self, rng=None):
        self.rng = rng or random
        self.ray_count = self.rng.randint(RAY_COUNT_MIN, RAY_COUNT_MAX)
        self.rotation = 0.0
        self.auto_pulses = []
        self.pulses = []

    def burst(self, alpha=255, auto=False):
        count = self.rng.randint(PULSE_BURST_MIN, PULSE_BURST_MAX)
        batch = [PulseCircle(alpha, rng=self.rng) for _ in range(count)]
        (self.auto_pulses if auto else self.pulses).extend(batch)
        return batch

    def update(self, width, height):
        self.rotation -= self.rng.uniform(RAY_SPIN_MIN, RAY_SPIN_MAX)
        for pulse in self.auto_pulses + self.pulses:
            pulse.update(width, height)
        self.auto_pulses = [p for p in self.auto_pulses if p.active]
        self.pulses = [p for p in self.pulses if p.active]

    def draw(self, surface, center):
        cx, cy = center
        for alpha, start, end in ray_segments(self.ray_count, self.rotation, cx, cy):
            pygame.draw.line(surface, (255, 255, 255, alpha), start, end, 1)
        for pulse in self.auto_pulses:
            pulse.draw(surface, center)
        for pulse in self.pulses:
            pulse.draw(surface, center)


class TheSun(Sketch):
    """Clicking sends out pulses; the first click starts the sound loop, later ones add a hit."""

    title = "The Sun"
    fps = SUN_FPS
    star_count = SUN_STARS
    sound_ids = tuple(sid for sid, _ in SUN_PLAYLIST) + (SoundId.SFX_5,)
    gesture_starts_audio = False

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, assets_dir=DEFAULT_ASSETS,
                 muted=False, rng=None):
        super().__init__(width, height, assets_dir, muted, rng)
        self.corona = Corona(rng=self.rng)
        self.playlist = AmbienceScheduler(self.board, SUN_PLAYLIST, rng=self.rng, shuffle=False)
        arm_timer(AUTO_PULSE, AUTO_PULSE_MS, self.rng)
        self.resize(width, height)

    @property
    def center(self):
        return (self.context.width // 2, self.context.height // 2)

    # --------- Sound ---------
    def on_audio_start(self):
        self.playlist.start()

    def on_audio_stop(self):
        self.playlist.stop()
        self.board.stop_all()

    # --------- Event handling ---------
    def press(self):
        self.corona.burst()
        if not self.context.sound_started:
            self.start_audio()
        else:
            self.board.play(SoundId.SFX_5)

    def handle_event(self, event):
        if super().handle_event(event):
            return True
        if event.type == AMBIENCE_END:
            self.playlist.handle_end()
        elif event.type == AUTO_PULSE:
            self.corona.burst(AUTO_PULSE_ALPHA, auto=True)
            arm_timer(AUTO_PULSE, AUTO_PULSE_MS, self.rng)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press()
        return False

    def close(self):
        pygame.time.set_timer(AUTO_PULSE, 0)
        super().close()

    # --------- Frame ---------
    def update(self):
        super().update()
        self.corona.update(self.context.width, self.context.height)

    def draw(self):
        self.draw_background()
        layer = pygame.Surface((self.context.width, self.context.height), pygame.SRCALPHA)
        self.corona.draw(layer, self.center)
        self.screen.blit(layer, (0, 0))

        pygame.draw.circle(self.screen, (0, 0, 0), self.center, SUN_DIAMETER // 2)
        pygame.draw.circle(self.screen, (255, 255, 255), self.center, SUN_DIAMETER // 2, 2)
        pygame.display.flip()
