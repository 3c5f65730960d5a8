"""Enum-keyed sound table on top of pygame.mixer."""

import random
import sys
from enum import Enum
from pathlib import Path

import pygame

from soroban.config import (
    AMBIENCE_TRACKS,
    ATMOSPHERE_FILES,
    BEAD_FILE,
    BG_CLICK_FILES,
    CLICK_FILES,
    MENU_CLICK_FILE,
    PLANET_AMBIENCE_FILE,
    RESET_FILE,
    RING_FADE_FILES,
    RINGS_AMBIENCE_FILE,
    SLIDE_FILE,
    SUN_CLICK_FILE,
    SUN_PLAYLIST_FILES,
    TURBULENCE_FILES,
)


class SoundId(Enum):
    # soroban
    AMBIENCE_1 = AMBIENCE_TRACKS[0][0]
    AMBIENCE_2 = AMBIENCE_TRACKS[1][0]
    AMBIENCE_3 = AMBIENCE_TRACKS[2][0]
    BEAD = BEAD_FILE
    RESET = RESET_FILE
    CLICK_1 = CLICK_FILES[0]
    CLICK_2 = CLICK_FILES[1]
    BG_CLICK_1 = BG_CLICK_FILES[0]
    BG_CLICK_2 = BG_CLICK_FILES[1]
    BG_CLICK_3 = BG_CLICK_FILES[2]
    # landing page
    MENU_CLICK = MENU_CLICK_FILE
    SLIDE = SLIDE_FILE
    # saturn
    PLANET_AMBIENCE = PLANET_AMBIENCE_FILE
    RINGS_AMBIENCE = RINGS_AMBIENCE_FILE
    ATMOSPHERE_1 = ATMOSPHERE_FILES[0]
    ATMOSPHERE_2 = ATMOSPHERE_FILES[1]
    ATMOSPHERE_3 = ATMOSPHERE_FILES[2]
    RING_FADE_1 = RING_FADE_FILES[0]
    RING_FADE_2 = RING_FADE_FILES[1]
    RING_FADE_3 = RING_FADE_FILES[2]
    # sun
    SFX_4 = SUN_PLAYLIST_FILES[0]
    SFX_6 = SUN_PLAYLIST_FILES[1]
    SPACE_1 = SUN_PLAYLIST_FILES[2]
    SPACE_2 = SUN_PLAYLIST_FILES[3]
    SPACE_3 = SUN_PLAYLIST_FILES[4]
    SFX_5 = SUN_CLICK_FILE
    # turbulence
    STORM = TURBULENCE_FILES["storm"]
    TONE = TURBULENCE_FILES["tone"]
    BLIP = TURBULENCE_FILES["blip"]
    BREATHE = TURBULENCE_FILES["breathe"]
    JUMPSCARE = TURBULENCE_FILES["jumpscare"]
    INCREASE = TURBULENCE_FILES["increase"]
    DECREASE = TURBULENCE_FILES["decrease"]

    @property
    def filename(self):
        return self.value


AMBIENCE = (
    (SoundId.AMBIENCE_1, AMBIENCE_TRACKS[0][1]),
    (SoundId.AMBIENCE_2, AMBIENCE_TRACKS[1][1]),
    (SoundId.AMBIENCE_3, AMBIENCE_TRACKS[2][1]),
)
CLICK_SFX = (SoundId.CLICK_1, SoundId.CLICK_2)
BG_CLICK_SFX = (SoundId.BG_CLICK_1, SoundId.BG_CLICK_2, SoundId.BG_CLICK_3)
ATMOSPHERE = tuple((sid, 1.0) for sid in (SoundId.ATMOSPHERE_1, SoundId.ATMOSPHERE_2, SoundId.ATMOSPHERE_3))
RING_FADE_SFX = (SoundId.RING_FADE_1, SoundId.RING_FADE_2, SoundId.RING_FADE_3)
SUN_PLAYLIST = tuple(
    (sid, 1.0) for sid in (SoundId.SFX_4, SoundId.SFX_6, SoundId.SPACE_1, SoundId.SPACE_2, SoundId.SPACE_3)
)

AMBIENCE_CHANNEL = 0


def warn(message):
    print(f"[soroban] {message}", file=sys.stderr)


class SoundBoard:
    """Fire-and-forget playback; every request is dropped while audio is off."""

    def __init__(self, context, sounds=None, ambience_channel=None):
        self.context = context
        self.sounds = dict(sounds or {})
        self.ambience_channel = ambience_channel

    @classmethod
    def load(cls, context, assets_dir, sound_ids=None):
        """Initialise the mixer and load whichever of ``sound_ids`` exist in ``assets_dir``.

        All known sounds are tried when ``sound_ids`` is None.
        """
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            warn(f"audio unavailable, running silent: {exc}")
            return cls(context)

        pygame.mixer.set_reserved(AMBIENCE_CHANNEL + 1)
        assets_dir = Path(assets_dir)
        sounds = {}
        for sound_id in (SoundId if sound_ids is None else sound_ids):
            if sound_id in sounds:
                continue
            path = assets_dir / sound_id.filename
            if not path.is_file():
                warn(f"missing sound: {path}")
                continue
            try:
                sounds[sound_id] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                warn(f"could not load {path}: {exc}")
        return cls(context, sounds, ambience_channel=pygame.mixer.Channel(AMBIENCE_CHANNEL))

    def has(self, sound_id):
        return sound_id in self.sounds

    def is_playing(self, sound_id):
        snd = self.sounds.get(sound_id)
        return snd is not None and snd.get_num_channels() > 0

    def play(self, sound_id, volume=1.0):
        snd = self.sounds.get(sound_id)
        if snd is None or not self.context.audio_enabled:
            return False
        try:
            if snd.get_num_channels() > 0:
                snd.stop()
            snd.set_volume(volume)
            snd.play()
        except pygame.error as exc:
            warn(f"could not play {sound_id.filename}: {exc}")
            return False
        return True

    def loop(self, sound_id, volume=1.0):
        snd = self.sounds.get(sound_id)
        if snd is None or not self.context.audio_enabled:
            return False
        try:
            if snd.get_num_channels() == 0:
                snd.set_volume(volume)
                snd.play(loops=-1)
        except pygame.error as exc:
            warn(f"could not loop {sound_id.filename}: {exc}")
            return False
        return True

    def play_random(self, sound_ids, volume=1.0, rng=None):
        available = [s for s in sound_ids if s in self.sounds]
        if not available:
            return None
        choice = (rng or random).choice(available)
        return choice if self.play(choice, volume) else None

    def stop(self, sound_id):
        snd = self.sounds.get(sound_id)
        if snd is not None and snd.get_num_channels() > 0:
            snd.stop()

    def stop_all(self):
        for sound_id in self.sounds:
            self.stop(sound_id)
        if self.ambience_channel is not None:
            self.ambience_channel.stop()
