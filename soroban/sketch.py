import random
import time
from pathlib import Path

import pygame

from soroban.audio import SoundBoard
from soroban.config import BG, DEFAULT_HEIGHT, DEFAULT_WIDTH, FPS, NUM_STARS
from soroban.context import AppContext
from soroban.starfield import Starfield

DEFAULT_ASSETS = Path("assets")


def arm_timer(event_type, interval_ms, rng=None):
    """One-shot pygame timer; ``interval_ms`` may be a (low, high) range drawn at random."""
    if isinstance(interval_ms, tuple):
        interval_ms = (rng or random).uniform(*interval_ms)
    pygame.time.set_timer(event_type, max(1, int(interval_ms)), 1)


class Sketch:
    """Resizable window, frame clock, starfield and sound board shared by every sketch.

    Subclasses build their own state after ``__init__`` and then call
    ``resize``; they override ``handle_event`` / ``update`` / ``draw`` and the
    ``on_audio_start`` / ``on_audio_stop`` hooks.
    """

    title = "Sketch"
    fps = FPS
    star_count = NUM_STARS
    sound_ids = ()
    gesture_starts_audio = True

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, assets_dir=DEFAULT_ASSETS,
                 muted=False, rng=None):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()
        self.rng = rng or random.Random()

        self.context = AppContext(width, height, sound_muted=muted)
        self.board = SoundBoard.load(self.context, assets_dir, self.sound_ids)
        self.starfield = None
        self.frame = 0
        self.running = False
        self.next_sketch = None

    def build_starfield(self):
        return Starfield(self.context.width, self.context.height, self.star_count, self.rng)

    def resize(self, width, height):
        self.context.resize(width, height)
        self.starfield = self.build_starfield()

    # --------- Sound ---------
    def start_audio(self):
        if self.context.sound_started:
            return
        self.context.sound_started = True
        if not self.context.sound_muted:
            self.on_audio_start()

    def toggle_sound(self):
        if not self.context.sound_started:
            self.context.sound_muted = False
            self.start_audio()
            return
        self.context.sound_muted = not self.context.sound_muted
        if self.context.sound_muted:
            self.on_audio_stop()
        else:
            self.on_audio_start()

    def on_audio_start(self):
        pass

    def on_audio_stop(self):
        self.board.stop_all()

    # --------- Event handling ---------
    def handle_event(self, event):
        """Window and pointer bookkeeping; returns True when the event is used up."""
        if event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            self.resize(event.w, event.h)
            return True
        if event.type == pygame.MOUSEMOTION:
            self.context.move_pointer(*event.pos)
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.context.move_pointer(*event.pos)
            if self.gesture_starts_audio:
                self.start_audio()
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_m:
                self.toggle_sound()
                return True
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return True
            if self.gesture_starts_audio:
                self.start_audio()
        return False

    # --------- Frame ---------
    def update(self):
        self.frame += 1

    def draw_background(self):
        self.screen.fill(BG)
        self.starfield.draw(self.screen)

    def draw(self):
        self.draw_background()
        pygame.display.flip()

    def run(self, duration=None):
        """Run the frame loop; returns the name of the sketch to open next, if any."""
        self.running = True
        start_time = time.time()
        while self.running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                else:
                    self.handle_event(event)
            self.update()
            self.draw()
            if duration and (time.time() - start_time) >= duration:
                self.running = False
        self.close()
        return self.next_sketch

    def close(self):
        self.on_audio_stop()
