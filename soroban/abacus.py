from dataclasses import dataclass

from soroban.column import SorobanColumn
from soroban.config import (
    ART_H,
    ART_PAD_H,
    ART_PAD_W,
    ART_SCALE_BASE,
    ART_W,
    BEAD_RADIUS,
    COL_SPACE,
    COLS,
    SLOTS,
)


@dataclass(frozen=True)
class Layout:
    """Uniform scale + translation placing the artwork in the middle of the window."""

    scale: float
    origin_x: float
    origin_y: float

    @classmethod
    def fit(cls, width, height):
        width = max(1, width)
        height = max(1, height)
        scale = min(width / (ART_W + ART_PAD_W), height / (ART_H + ART_PAD_H)) * ART_SCALE_BASE
        return cls(
            scale=scale,
            origin_x=width / 2 - (ART_W * scale) / 2,
            origin_y=height / 2 - (ART_H * scale) / 2,
        )

    def to_screen(self, x, y):
        return (self.origin_x + x * self.scale, self.origin_y + y * self.scale)

    def to_local(self, px, py):
        return ((px - self.origin_x) / self.scale, (py - self.origin_y) / self.scale)


class Abacus:
    """Five soroban columns, most significant digit on the left."""

    def __init__(self, cols=COLS, rng=None):
        self.columns = [
            SorobanColumn(c * COL_SPACE + BEAD_RADIUS, SLOTS, BEAD_RADIUS, rng=rng)
            for c in range(cols)
        ]
        self._viewport = None
        self.layout = None

    def layout_for(self, width, height):
        viewport = (max(1, width), max(1, height))
        if viewport != self._viewport:
            self._viewport = viewport
            self.layout = Layout.fit(*viewport)
        return self.layout

    @property
    def max_value(self):
        return 10 ** len(self.columns) - 1

    def digits(self):
        return [col.get_value() for col in self.columns]

    def get_total_value(self):
        total = 0
        for power, col in enumerate(reversed(self.columns)):
            total += col.get_value() * 10 ** power
        return total

    def set_total_value(self, value):
        value = max(0, min(self.max_value, int(value)))
        for col in reversed(self.columns):
            value, digit = divmod(value, 10)
            col.set_value(digit)

    def reset(self):
        for col in self.columns:
            col.reset()

    def update(self):
        for col in self.columns:
            col.update()

    def snap(self):
        for col in self.columns:
            col.snap()

    def draw(self, surface):
        layout = self.layout_for(*surface.get_size())
        for col in self.columns:
            col.draw(surface, layout)

    def press(self, px, py, width, height):
        """Offer a screen-space press to each column in turn; True on the first move."""
        layout = self.layout_for(width, height)
        for col in self.columns:
            if col.check_interaction(px, py, layout):
                return True
        return False
