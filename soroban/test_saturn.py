import math
import random

import pygame
import pytest

from soroban.audio import RING_FADE_SFX, SoundId
from soroban.config import RING_SPAWN_FRAMES
from soroban.saturn import DisruptedSaturn, RingArc, RingSystem, spawn_rings


class FakeSound:
    def __init__(self):
        self.plays = []
        self.playing = False

    def play(self, loops=0):
        self.plays.append(loops)
        self.playing = True

    def stop(self):
        self.playing = False

    def set_volume(self, volume):
        self.volume = volume

    def get_num_channels(self):
        return int(self.playing)


def test_ring_fades_slowly_then_fast_until_dead():
    ring = RingArc(0, 0, 100, 20, 0.5, rng=random.Random(1))
    frames = 0
    while ring.alpha > 80:
        ring.update()
        frames += 1
    assert frames == 88  # 255 -> 79 in steps of 2
    assert not ring.is_dead()
    while not ring.is_dead():
        ring.update()
        frames += 1
    assert frames == 88 + 10


def test_ring_angles_centre_on_the_shared_rotation():
    ring = RingArc(0, 0, 100, 20, 0.6, rng=random.Random(1))
    start, end = ring.angles(1.0)
    assert end - start == pytest.approx(0.6)
    assert (start + end) / 2 == pytest.approx(1.0 + ring.offset)


def test_batch_size_is_clamped_and_rings_widen_outward():
    rng = random.Random(4)
    assert len(spawn_rings(0, 0, 100, 0, rng)) == 3
    assert len(spawn_rings(0, 0, 100, 500, rng)) == 70
    batch = spawn_rings(50, 60, 100, 12, rng)
    assert len(batch) == 12
    assert batch[0].w == pytest.approx(200)
    assert batch[0].h == pytest.approx(27)
    assert all(b.w > a.w and b.h > a.h for a, b in zip(batch, batch[1:]))
    assert len({ring.span for ring in batch}) == 1
    assert 0 <= batch[0].span <= math.pi / 3


def test_system_spawns_on_schedule_and_speeds_up():
    system = RingSystem(800, 600, rng=random.Random(2))
    assert system.planet_radius == pytest.approx(210)
    assert len(system.rings) == 3
    for _ in range(2 * RING_SPAWN_FRAMES - 1):
        system.update()
    assert len(system.rings) == 3
    system.update()
    assert len(system.rings) == 6
    assert system.speed == 0.005
    for _ in range(20):
        system.update()
    assert system.speed == 0.02


def test_dead_rings_are_dropped():
    system = RingSystem(400, 400, rng=random.Random(2))
    for _ in range(400):
        system.update()
    assert all(not ring.is_dead() for ring in system.rings)
    assert len(system.rings) <= 3 * 11


def test_ring_zone_is_a_band_around_the_planet():
    system = RingSystem(1000, 1000, rng=random.Random(2))
    r = system.planet_radius
    assert not system.in_ring_zone(500, 500)
    assert not system.in_ring_zone(500 + r * 0.5, 500)
    assert system.in_ring_zone(500 + r * 1.2, 500)
    assert not system.in_ring_zone(500 + r * 2.5, 500)


def test_scatter_picks_a_new_ring_count():
    system = RingSystem(600, 600, rng=random.Random(9))
    for _ in range(50):
        assert 3 <= system.scatter() <= 20
    system.requested = 15
    system.spawn()
    assert len(system.rings) == 3 + 15


def test_resize_rebuilds_the_rings_for_the_new_planet():
    system = RingSystem(800, 600, rng=random.Random(2))
    system.update()
    system.resize(400, 1000)
    assert (system.cx, system.cy) == (200, 500)
    assert system.planet_radius == pytest.approx(140)
    assert len(system.rings) == 3
    assert system.rings[0].w == pytest.approx(280)


def test_system_draws_onto_a_layer():
    system = RingSystem(300, 200, rng=random.Random(2))
    layer = pygame.Surface((300, 200), pygame.SRCALPHA)
    for _ in range(5):
        system.update()
    system.draw(layer)
    # the planet's front half is opaque black with a white rim on top
    assert any(layer.get_at((150, y))[:3] == (255, 255, 255) for y in range(27, 34))
    assert layer.get_at((150, 80)) == (0, 0, 0, 255)


@pytest.fixture
def saturn(headless, tmp_path):
    sketch = DisruptedSaturn(600, 600, assets_dir=tmp_path, rng=random.Random(6))
    sketch.context.sound_started = True
    for sid in RING_FADE_SFX + (SoundId.PLANET_AMBIENCE, SoundId.RINGS_AMBIENCE):
        sketch.board.sounds[sid] = FakeSound()
    return sketch


def test_click_on_the_rings_scatters_and_plays_a_fade_sound(saturn):
    r = saturn.system.planet_radius
    saturn.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300 + int(r * 1.2), 300), button=1))
    assert 3 <= saturn.system.requested <= 20
    assert sum(len(saturn.board.sounds[sid].plays) for sid in RING_FADE_SFX) == 1


def test_click_on_the_planet_does_nothing(saturn):
    saturn.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1))
    assert saturn.system.requested == 0
    assert all(not saturn.board.sounds[sid].plays for sid in RING_FADE_SFX)


def test_s_key_toggles_the_ambience(headless, tmp_path):
    sketch = DisruptedSaturn(600, 600, assets_dir=tmp_path, rng=random.Random(6))
    planet = sketch.board.sounds[SoundId.PLANET_AMBIENCE] = FakeSound()
    rings = sketch.board.sounds[SoundId.RINGS_AMBIENCE] = FakeSound()
    sketch.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s, mod=0, unicode="s"))
    assert sketch.context.audio_enabled
    assert planet.plays == [-1] and rings.plays == [-1]
    assert sketch.atmosphere.running
    sketch.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s, mod=0, unicode="s"))
    assert not planet.playing and not rings.playing
    assert not sketch.atmosphere.running


def test_clicks_alone_do_not_start_the_sound(headless, tmp_path):
    sketch = DisruptedSaturn(600, 600, assets_dir=tmp_path, rng=random.Random(6))
    sketch.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
    assert not sketch.context.sound_started


def test_frame_updates_and_draws(saturn):
    for _ in range(3):
        saturn.update()
        saturn.draw()
    assert saturn.system.frame == 3
