import random

import pygame

from soroban.abacus import Abacus, Layout
from soroban.column import EARTH, HEAVEN
from soroban.config import ART_H, ART_W

VIEWPORTS = [(1200, 900), (640, 480), (320, 1400), (2560, 400), (37, 53), (1, 1)]


def make_abacus():
    return Abacus(rng=random.Random(3))


def test_total_value_maps_rightmost_column_to_units():
    abacus = make_abacus()
    for col, digit in zip(abacus.columns, [1, 2, 3, 4, 5]):
        col.set_value(digit)
    assert abacus.get_total_value() == 12345
    assert abacus.digits() == [1, 2, 3, 4, 5]


def test_set_total_value_spreads_digits_and_clamps():
    abacus = make_abacus()
    abacus.set_total_value(90210)
    assert abacus.digits() == [9, 0, 2, 1, 0]
    assert abacus.get_total_value() == 90210
    abacus.set_total_value(123456)
    assert abacus.get_total_value() == 99999
    abacus.set_total_value(-4)
    assert abacus.get_total_value() == 0


def test_reset_returns_every_column_to_zero():
    abacus = make_abacus()
    abacus.set_total_value(31415)
    abacus.reset()
    assert abacus.get_total_value() == 0


def test_layout_centres_the_artwork():
    for w, h in VIEWPORTS[:4]:
        layout = Layout.fit(w, h)
        cx, cy = layout.to_screen(ART_W / 2, ART_H / 2)
        assert abs(cx - w / 2) < 1e-9
        assert abs(cy - h / 2) < 1e-9
        x0, y0 = layout.to_screen(0, 0)
        x1, y1 = layout.to_screen(ART_W, ART_H)
        assert 0 <= x0 and x1 <= w
        assert 0 <= y0 and y1 <= h


def test_layout_inverse_round_trips():
    layout = Layout.fit(777, 555)
    for x, y in [(0, 0), (60, 532.5), (1100, 1012.5), (-50, 3000)]:
        lx, ly = layout.to_local(*layout.to_screen(x, y))
        assert abs(lx - x) < 1e-9
        assert abs(ly - y) < 1e-9


def test_degenerate_viewport_is_clamped():
    layout = Layout.fit(0, -10)
    assert layout.scale > 0
    abacus = make_abacus()
    assert not abacus.press(-500, 10 ** 6, 0, 0)


def test_layout_cached_per_viewport():
    abacus = make_abacus()
    first = abacus.layout_for(800, 600)
    assert abacus.layout_for(800, 600) is first
    second = abacus.layout_for(1024, 600)
    assert second is not first
    assert abacus.layout is second


def test_bead_under_rendered_position_after_resizes():
    abacus = make_abacus()
    abacus.set_total_value(50505)
    abacus.snap()
    for w, h in VIEWPORTS:
        layout = abacus.layout_for(w, h)
        for col in abacus.columns:
            sx, sy = layout.to_screen(col.x, col.heaven.y)
            assert col.hit_test(*layout.to_local(sx, sy)) == (HEAVEN, None)
            for i, bead in enumerate(col.earths):
                sx, sy = layout.to_screen(col.x, bead.y)
                assert col.hit_test(*layout.to_local(sx, sy)) == (EARTH, i)


def test_press_just_above_bead_moves_it_at_every_size():
    for w, h in VIEWPORTS[:5]:
        abacus = make_abacus()
        abacus.layout_for(400, 400)
        layout = abacus.layout_for(w, h)
        col = abacus.columns[-1]
        sx, sy = layout.to_screen(col.x, col.earths[0].y - 5)
        assert abacus.press(sx, sy, w, h)
        assert abacus.get_total_value() == 1


def test_press_stops_at_first_column_that_moves():
    abacus = make_abacus()
    layout = abacus.layout_for(1200, 900)
    col = abacus.columns[2]
    sx, sy = layout.to_screen(col.x, col.heaven.y + 10)
    assert abacus.press(sx, sy, 1200, 900)
    assert abacus.digits() == [0, 0, 5, 0, 0]


def test_update_eases_all_beads_to_rest():
    abacus = make_abacus()
    abacus.set_total_value(99999)
    for _ in range(400):
        abacus.update()
    for col in abacus.columns:
        assert col.heaven.settled
        assert all(bead.settled for bead in col.earths)


def test_draw_paints_beads_on_offscreen_surface():
    abacus = make_abacus()
    surface = pygame.Surface((600, 450), pygame.SRCALPHA)
    abacus.draw(surface)
    layout = abacus.layout
    col = abacus.columns[0]
    sx, sy = layout.to_screen(col.x, col.heaven.y)
    radius_px = col.r * layout.scale
    edge = surface.get_at((int(round(sx + radius_px - 1)), int(round(sy))))
    assert edge.a > 0
    assert surface.get_at((0, 0)).a == 0
