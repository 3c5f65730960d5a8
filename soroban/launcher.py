"""Landing page: a constellation of labelled dots, each opening one of the sketches."""

import math

import pygame

from soroban.audio import SoundId
from soroban.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    HUD_FONT_SIZE,
    HUD_FONTS,
    MENU_CONNECTIONS,
    MENU_DOTS,
    MENU_FADE_SPEED,
    MENU_HOVER_LERP,
    MENU_LABEL_SIZE,
    MENU_LINE_SPEED,
    MENU_STARS,
    TEXT_COLOR,
    VOLUME_MENU_AMBIENCE,
    VOLUME_MENU_CLICK,
    VOLUME_MENU_SLIDE,
)
from soroban.sketch import DEFAULT_ASSETS, Sketch


class Dot:
    """A constellation node placed by window fractions; its ring swells while hovered."""

    def __init__(self, fx, fy, label="", radius=5, show_border=True, target=None):
        self.fx = fx
        self.fy = fy
        self.x = 0.0
        self.y = 0.0
        self.label = label
        self.radius = radius * 1.3
        self.border_size = self.radius * 3
        self.current_size = self.border_size
        self.show_border = show_border
        self.target = target
        self.hovered = False

    def place(self, width, height):
        self.x = self.fx * width
        self.y = self.fy * height

    def update(self, mx, my):
        self.hovered = math.hypot(mx - self.x, my - self.y) < self.current_size / 2 + 10
        goal = self.border_size * 4 if self.hovered else self.border_size
        self.current_size += (goal - self.current_size) * MENU_HOVER_LERP

    def is_clicked(self, mx, my):
        return math.hypot(mx - self.x, my - self.y) <= self.current_size / 2

    def draw(self, surface, font):
        center = (int(self.x), int(self.y))
        if self.show_border and self.current_size >= 2:
            pygame.draw.circle(surface, TEXT_COLOR, center, int(self.current_size / 2), 2)
        if self.radius >= 1:
            pygame.draw.circle(surface, TEXT_COLOR, center, max(1, int(self.radius / 2)))
        if self.label:
            img = font.render(self.label, True, TEXT_COLOR)
            surface.blit(img, img.get_rect(midleft=(self.x + self.current_size * 0.7,
                                                    self.y - self.current_size / 2 - 10)))


def build_dots():
    return [Dot(fx, fy, label, radius, border, target)
            for (fx, fy), label, radius, border, target in MENU_DOTS]


def connection_segments(dots, progress, connections=MENU_CONNECTIONS):
    """Line segments drawn so far; the links grow one after another as ``progress`` goes 0 -> 1."""
    segments = []
    for i, (a, b) in enumerate(connections):
        amount = progress * len(connections) - i
        if amount <= 0:
            continue
        amount = min(1.0, amount)
        start = (dots[a].x, dots[a].y)
        end = (dots[a].x + (dots[b].x - dots[a].x) * amount,
               dots[a].y + (dots[b].y - dots[a].y) * amount)
        segments.append((start, end))
    return segments


class Launcher(Sketch):
    """Pick a sketch: hover swells a dot, clicking fades out and opens it."""

    title = "Planetary Soroban and friends"
    star_count = MENU_STARS
    sound_ids = (SoundId.AMBIENCE_1, SoundId.MENU_CLICK, SoundId.SLIDE)

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, assets_dir=DEFAULT_ASSETS,
                 muted=False, rng=None):
        super().__init__(width, height, assets_dir, muted, rng)
        self.dots = build_dots()
        self.line_progress = 0.0
        self.fade_out = 0.0
        self.selected = None
        self.label_font = pygame.font.SysFont(HUD_FONTS, MENU_LABEL_SIZE)
        self.cursor_font = pygame.font.SysFont(HUD_FONTS, HUD_FONT_SIZE)
        self.resize(width, height)

    @property
    def active_dots(self):
        # the two end points only anchor the lines
        return self.dots[1:-1]

    @property
    def transitioning(self):
        return self.selected is not None

    def resize(self, width, height):
        super().resize(width, height)
        for dot in self.dots:
            dot.place(self.context.width, self.context.height)

    # --------- Sound ---------
    def on_audio_start(self):
        self.board.loop(SoundId.AMBIENCE_1, VOLUME_MENU_AMBIENCE)

    # --------- Event handling ---------
    def press(self, x, y):
        if self.transitioning:
            return None
        self.board.play(SoundId.MENU_CLICK, VOLUME_MENU_CLICK)
        for dot in self.active_dots:
            if dot.target and dot.is_clicked(x, y):
                self.board.play(SoundId.SLIDE, VOLUME_MENU_SLIDE)
                self.selected = dot.target
                return dot.target
        return None

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            # the pointer arriving over the window counts as the first gesture
            self.start_audio()
        if super().handle_event(event):
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press(*event.pos)
        return False

    # --------- Frame ---------
    def update(self):
        super().update()
        self.line_progress = min(1.0, self.line_progress + MENU_LINE_SPEED)
        for dot in self.active_dots:
            dot.update(self.context.mouse_x, self.context.mouse_y)
        if self.transitioning:
            self.fade_out += MENU_FADE_SPEED
            if self.fade_out >= 1:
                self.next_sketch = self.selected
                self.running = False

    def draw(self):
        self.draw_background()
        for start, end in connection_segments(self.dots, self.line_progress):
            pygame.draw.line(self.screen, TEXT_COLOR, start, end, 2)
        for dot in self.active_dots:
            dot.draw(self.screen, self.label_font)

        mx, my = self.context.mouse_x, self.context.mouse_y
        if mx >= 0 and my >= 0:
            img = self.cursor_font.render(f"x: {round(mx)}  y: {round(my)}", True, TEXT_COLOR)
            self.screen.blit(img, img.get_rect(midleft=(mx + 12, my)))

        if self.fade_out > 0:
            veil = pygame.Surface((self.context.width, self.context.height), pygame.SRCALPHA)
            veil.fill((0, 0, 0, min(255, int(self.fade_out * 255))))
            self.screen.blit(veil, (0, 0))
        pygame.display.flip()
