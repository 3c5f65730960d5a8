import random

import pygame

from soroban.audio import BG_CLICK_SFX, CLICK_SFX, SoundBoard, SoundId
from soroban.context import AppContext


class FakeSound:
    def __init__(self):
        self.channels = 0
        self.volume = None
        self.plays = []
        self.stops = 0

    def play(self, loops=0):
        self.channels = 1
        self.plays.append(loops)

    def stop(self):
        self.channels = 0
        self.stops += 1

    def set_volume(self, volume):
        self.volume = volume

    def get_num_channels(self):
        return self.channels


class FakeChannel:
    def __init__(self):
        self.stopped = 0

    def stop(self):
        self.stopped += 1


def make_board(ids=tuple(SoundId), started=True, muted=False):
    context = AppContext(800, 600, sound_started=started, sound_muted=muted)
    sounds = {sid: FakeSound() for sid in ids}
    return SoundBoard(context, sounds, ambience_channel=FakeChannel()), sounds


def test_requests_dropped_until_audio_started():
    board, sounds = make_board(started=False)
    assert not board.play(SoundId.BEAD, 0.5)
    assert sounds[SoundId.BEAD].plays == []
    board.context.sound_started = True
    assert board.play(SoundId.BEAD, 0.5)
    assert sounds[SoundId.BEAD].plays == [0]
    assert sounds[SoundId.BEAD].volume == 0.5


def test_requests_dropped_while_muted():
    board, sounds = make_board(muted=True)
    assert not board.play(SoundId.RESET, 0.1)
    assert not board.loop(SoundId.AMBIENCE_1, 0.5)
    assert all(not s.plays for s in sounds.values())


def test_play_restarts_a_sound_already_playing():
    board, sounds = make_board()
    board.play(SoundId.BEAD)
    board.play(SoundId.BEAD)
    assert sounds[SoundId.BEAD].stops == 1
    assert sounds[SoundId.BEAD].plays == [0, 0]


def test_loop_does_not_stack():
    board, sounds = make_board()
    board.loop(SoundId.AMBIENCE_2, 0.1)
    board.loop(SoundId.AMBIENCE_2, 0.1)
    assert sounds[SoundId.AMBIENCE_2].plays == [-1]
    assert board.is_playing(SoundId.AMBIENCE_2)


def test_missing_sound_is_ignored():
    board, _ = make_board(ids=(SoundId.BEAD,))
    assert not board.play(SoundId.RESET)
    assert not board.is_playing(SoundId.RESET)
    board.stop(SoundId.RESET)
    assert board.play_random(CLICK_SFX, 0.05) is None


def test_play_random_only_picks_loaded_sounds():
    board, sounds = make_board(ids=(SoundId.BG_CLICK_2,))
    rng = random.Random(5)
    for _ in range(10):
        assert board.play_random(BG_CLICK_SFX, 0.01, rng) == SoundId.BG_CLICK_2
    assert sounds[SoundId.BG_CLICK_2].volume == 0.01


def test_stop_all_halts_sounds_and_ambience_channel():
    board, sounds = make_board()
    board.play(SoundId.BEAD)
    board.loop(SoundId.AMBIENCE_1)
    board.stop_all()
    assert not board.is_playing(SoundId.BEAD)
    assert not board.is_playing(SoundId.AMBIENCE_1)
    assert board.ambience_channel.stopped == 1


def test_load_from_empty_directory_runs_silent(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    context = AppContext(800, 600, sound_started=True)
    try:
        board = SoundBoard.load(context, tmp_path)
    finally:
        pygame.mixer.quit()
    assert board.sounds == {}
    assert not board.play(SoundId.BEAD)
    assert "[soroban]" in capsys.readouterr().err


def test_context_audio_flag_and_resize_clamp():
    context = AppContext(0, -5)
    assert (context.width, context.height) == (1, 1)
    assert not context.audio_enabled
    context.sound_started = True
    assert context.audio_enabled
    context.sound_muted = True
    assert not context.audio_enabled


class BrokenSound(FakeSound):
    def play(self, loops=0):
        raise pygame.error("device lost")


def test_playback_failure_is_reported_and_ignored(capsys):
    board, sounds = make_board(ids=())
    board.sounds[SoundId.BEAD] = BrokenSound()
    board.sounds[SoundId.AMBIENCE_1] = BrokenSound()
    assert not board.play(SoundId.BEAD, 0.5)
    assert not board.loop(SoundId.AMBIENCE_1)
    assert board.play_random((SoundId.BEAD,)) is None
    err = capsys.readouterr().err
    assert "[soroban] could not play Bead.wav" in err
    assert "could not loop Ambience.mp3" in err


def test_load_only_tries_the_requested_sounds(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    context = AppContext(800, 600, sound_started=True)
    try:
        SoundBoard.load(context, tmp_path, (SoundId.STORM, SoundId.SLIDE))
    finally:
        pygame.mixer.quit()
    err = capsys.readouterr().err
    assert "storm.wav" in err
    assert "slide.wav" in err
    assert "Bead.wav" not in err
