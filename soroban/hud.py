import pygame

from soroban.config import (
    HUD_FONT_SIZE,
    HUD_FONTS,
    HUD_MARGIN,
    RESET_H,
    RESET_W,
    RESET_X,
    TEXT_COLOR,
    VALUE_COLOR,
)


def reset_hit(x, y, height):
    """Press test for the Reset label; screen space, unaffected by the abacus scale."""
    return RESET_X < x < RESET_X + RESET_W and height - RESET_H < y < height


class Hud:
    """Value read-out (bottom right) and Reset label (bottom left), drawn unscaled."""

    def __init__(self, font=None):
        self.font = font or pygame.font.SysFont(HUD_FONTS, HUD_FONT_SIZE)

    def draw(self, surface, value, context):
        width, height = surface.get_size()
        baseline = height - HUD_MARGIN

        value_img = self.font.render(str(value), True, VALUE_COLOR)
        surface.blit(value_img, value_img.get_rect(bottomright=(width - HUD_MARGIN, baseline)))

        label_gap = 60 if width < 600 else 70
        label_img = self.font.render("Current value: ", True, TEXT_COLOR)
        surface.blit(label_img, label_img.get_rect(bottomright=(width - label_gap, baseline)))

        hover = reset_hit(context.mouse_x, context.mouse_y, height)
        reset_img = self.font.render("Reset", True, VALUE_COLOR if hover else TEXT_COLOR)
        surface.blit(reset_img, reset_img.get_rect(bottomleft=(RESET_X, baseline)))
