import random
from enum import Enum

from soroban.audio import BG_CLICK_SFX, CLICK_SFX, SoundId
from soroban.config import VOLUME_BEAD, VOLUME_BG_CLICK, VOLUME_CLICK, VOLUME_RESET
from soroban.hud import reset_hit


class PressResult(Enum):
    RESET = "reset"
    BEAD = "bead"
    BACKGROUND = "background"


class InteractionController:
    """Routes pointer presses to the reset control, then the columns, then ambient feedback."""

    def __init__(self, abacus, board, context, rng=None):
        self.abacus = abacus
        self.board = board
        self.context = context
        self.rng = rng or random

    def reset(self):
        self.abacus.reset()
        self.board.play(SoundId.RESET, VOLUME_RESET)
        return PressResult.RESET

    def press(self, x, y):
        width, height = self.context.width, self.context.height
        if reset_hit(x, y, height):
            return self.reset()

        if self.abacus.press(x, y, width, height):
            self.board.play(SoundId.BEAD, VOLUME_BEAD)
            self.board.play_random(CLICK_SFX, VOLUME_CLICK, self.rng)
            return PressResult.BEAD

        self.board.play_random(BG_CLICK_SFX, VOLUME_BG_CLICK, self.rng)
        return PressResult.BACKGROUND
